"""API routes for applicants."""

import logging

from fastapi import APIRouter, Depends

from recruitment.core.exceptions import not_found_exception
from recruitment.models.person import Person
from recruitment.routers.dependencies import (
    get_application_service,
    get_current_applicant,
    require_applicant,
)
from recruitment.schemas.application import (
    ApplicationDetails,
    ApplicationForm,
    ApplicationSummary,
    CompetenceOption,
)
from recruitment.services.application_service import ApplicationService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/applicant",
    tags=["applicant"],
    dependencies=[Depends(require_applicant)],
)


@router.get("/competences", response_model=list[CompetenceOption])
async def list_competences(
    service: ApplicationService = Depends(get_application_service),
):
    """Competence catalog for the application form."""
    return await service.get_all_competences()


@router.get("/application", response_model=ApplicationDetails)
async def get_own_application(
    person: Person = Depends(get_current_applicant),
    service: ApplicationService = Depends(get_application_service),
):
    """The logged-in applicant's application with all details."""
    application = await service.get_application_by_person(person.id)
    if application is None:
        logger.debug(f"User {person.username} has no application")
        raise not_found_exception("No application submitted yet")
    return await service.get_application_details(application.id)


@router.post("/application", response_model=ApplicationSummary)
async def submit_application(
    form: ApplicationForm,
    person: Person = Depends(get_current_applicant),
    service: ApplicationService = Depends(get_application_service),
):
    """Submit or resubmit the logged-in applicant's application."""
    return await service.submit_application(person.id, form)
