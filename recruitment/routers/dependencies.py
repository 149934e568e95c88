"""Service providers shared by the routers."""

from fastapi import Depends

from recruitment.core.security import Principal, require_role
from recruitment.core.storage import SessionFactory, Storage, get_session_factory
from recruitment.models.person import Person
from recruitment.services.application_service import (
    ApplicationService,
    create_application_service,
)
from recruitment.services.auth_service import AuthService, create_auth_service
from recruitment.services.registration_service import (
    RegistrationService,
    create_registration_service,
)

require_applicant = require_role(Storage.APPLICANT_ROLE)
require_recruiter = require_role(Storage.RECRUITER_ROLE)


async def get_application_service(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> ApplicationService:
    """Create application service with dependencies."""
    return create_application_service(session_factory)


async def get_auth_service(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> AuthService:
    return create_auth_service(session_factory)


async def get_registration_service(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> RegistrationService:
    return create_registration_service(session_factory)


async def get_current_applicant(
    principal: Principal = Depends(require_applicant),
    auth: AuthService = Depends(get_auth_service),
) -> Person:
    """The applicant behind the current session."""
    return await auth.get_person(principal.username)
