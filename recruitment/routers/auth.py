"""Authentication router: session login and logout."""

import logging

from fastapi import APIRouter, Depends, Request

from recruitment.core.security import login_session, logout_session, session_principal
from recruitment.routers.dependencies import get_auth_service
from recruitment.schemas.auth import LoginRequest, PrincipalResponse
from recruitment.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=PrincipalResponse)
async def login(
    credentials: LoginRequest,
    request: Request,
    auth: AuthService = Depends(get_auth_service),
):
    """Check credentials and open a session."""
    principal = await auth.authenticate(credentials.username, credentials.password)
    login_session(request, principal)
    return PrincipalResponse(
        authenticated=True, username=principal.username, role=principal.role
    )


@router.post("/logout", response_model=PrincipalResponse)
async def logout(request: Request):
    """Close the current session."""
    principal = session_principal(request)
    if principal is not None:
        logger.info(f"User logged out: {principal.username}")
    logout_session(request)
    return PrincipalResponse(authenticated=False)


@router.get("/status", response_model=PrincipalResponse)
async def auth_status(request: Request):
    """Check user authentication status."""
    principal = session_principal(request)
    if principal is None:
        return PrincipalResponse(authenticated=False)
    return PrincipalResponse(
        authenticated=True, username=principal.username, role=principal.role
    )
