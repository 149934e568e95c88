"""Pydantic schemas for request/response validation."""

from recruitment.schemas.application import (
    ApplicationDetails,
    ApplicationForm,
    ApplicationListItem,
    ApplicationPage,
    ApplicationSummary,
    AvailabilityForm,
    CompetenceForm,
    CompetenceOption,
    StatusUpdateRequest,
)
from recruitment.schemas.auth import LoginRequest, PrincipalResponse, RegistrationForm

__all__ = [
    "ApplicationDetails",
    "ApplicationForm",
    "ApplicationListItem",
    "ApplicationPage",
    "ApplicationSummary",
    "AvailabilityForm",
    "CompetenceForm",
    "CompetenceOption",
    "LoginRequest",
    "PrincipalResponse",
    "RegistrationForm",
    "StatusUpdateRequest",
]
