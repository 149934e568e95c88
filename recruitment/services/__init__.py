"""Application services."""

from recruitment.services.application_service import (
    ApplicationService,
    create_application_service,
)
from recruitment.services.auth_service import AuthService, create_auth_service
from recruitment.services.registration_service import (
    RegistrationService,
    create_registration_service,
)
from recruitment.services.versioning import (
    ExpectedVersion,
    Unconditional,
    VersionCheck,
    version_check,
)

__all__ = [
    "ApplicationService",
    "AuthService",
    "ExpectedVersion",
    "RegistrationService",
    "Unconditional",
    "VersionCheck",
    "create_application_service",
    "create_auth_service",
    "create_registration_service",
    "version_check",
]
