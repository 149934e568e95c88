"""API routes for recruiters reviewing applications."""

import logging

from fastapi import APIRouter, Depends, Query

from recruitment.core.security import Principal
from recruitment.routers.dependencies import get_application_service, require_recruiter
from recruitment.schemas.application import (
    ApplicationDetails,
    ApplicationListItem,
    ApplicationPage,
    ApplicationSummary,
    StatusUpdateRequest,
)
from recruitment.services.application_service import ApplicationService
from recruitment.services.versioning import version_check
from recruitment.utils.filters import parse_status_filter

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/recruiter",
    tags=["recruiter"],
    dependencies=[Depends(require_recruiter)],
)


@router.get("/applications", response_model=list[ApplicationListItem])
async def list_applications(
    status: str | None = Query(default=None, description="Filter by status"),
    service: ApplicationService = Depends(get_application_service),
):
    """All applications, newest first."""
    return await service.list_applications(parse_status_filter(status))


@router.get("/applications/paged", response_model=ApplicationPage)
async def list_applications_paged(
    page: int = Query(default=0, ge=0, description="0-based page index"),
    status: str | None = Query(default=None, description="Filter by status"),
    service: ApplicationService = Depends(get_application_service),
):
    """One fixed-size page of applications."""
    return await service.list_applications_page(page, parse_status_filter(status))


@router.get("/applications/{application_id}", response_model=ApplicationDetails)
async def get_application(
    application_id: int,
    service: ApplicationService = Depends(get_application_service),
):
    """Full details of one application."""
    return await service.get_application_details(application_id)


@router.put(
    "/applications/{application_id}/status", response_model=ApplicationSummary
)
async def update_application_status(
    application_id: int,
    request: StatusUpdateRequest,
    service: ApplicationService = Depends(get_application_service),
    principal: Principal = Depends(require_recruiter),
):
    """Change an application's status, guarded by the caller's observed version."""
    logger.info(
        f"Recruiter {principal.username} sets application {application_id} "
        f"to {request.status} (expected version {request.expected_version})"
    )
    return await service.update_status(
        application_id, request.status, version_check(request.expected_version)
    )
