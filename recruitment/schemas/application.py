"""Schemas for application submission, review and listing."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from recruitment.models.application import ApplicationStatus


class CompetenceForm(BaseModel):
    """One claimed competence in a submission."""

    competence_id: int | None = Field(None, description="Catalog competence ID")
    years_of_experience: Decimal | None = Field(
        None, ge=0, max_digits=4, decimal_places=2, description="Years of experience"
    )


class AvailabilityForm(BaseModel):
    """One availability period in a submission."""

    from_date: date | None = Field(None, description="First available day")
    to_date: date | None = Field(None, description="Last available day")

    def is_valid(self) -> bool:
        return (
            self.from_date is not None
            and self.to_date is not None
            and self.to_date >= self.from_date
        )


class ApplicationForm(BaseModel):
    """Full replacement of an applicant's competences and availability."""

    competences: list[CompetenceForm] = Field(default_factory=list)
    availabilities: list[AvailabilityForm] = Field(default_factory=list)


class StatusUpdateRequest(BaseModel):
    """Recruiter request to move an application to another status."""

    status: str = Field(..., description="UNHANDLED, ACCEPTED or REJECTED")
    expected_version: int | None = Field(
        default=None,
        description="Version the caller last observed; omit to skip the check",
    )


class ApplicationSummary(BaseModel):
    """Application row as stored."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    person_id: int
    status: ApplicationStatus
    created_at: datetime
    updated_at: datetime
    version: int


class CompetenceOption(BaseModel):
    """Catalog entry offered on the application form."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class CompetenceDetail(BaseModel):
    competence_name: str
    years_of_experience: Decimal


class AvailabilityDetail(BaseModel):
    from_date: date
    to_date: date


class ApplicationListItem(BaseModel):
    """Row of the recruiter's application list."""

    id: int
    person_name: str
    status: ApplicationStatus
    created_at: datetime


class ApplicationDetails(BaseModel):
    """Everything a recruiter sees about one application."""

    id: int
    person_name: str
    person_email: str | None
    person_pnr: str | None
    status: ApplicationStatus
    created_at: datetime
    updated_at: datetime
    version: int
    competences: list[CompetenceDetail]
    availabilities: list[AvailabilityDetail]


class ApplicationPage(BaseModel):
    """One fixed-size page of the application list."""

    content: list[ApplicationListItem]
    page: int = Field(..., ge=0)
    size: int
    total_elements: int
    total_pages: int
    has_next: bool
    has_previous: bool
