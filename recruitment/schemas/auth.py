"""Schemas for registration and login."""

from pydantic import BaseModel, EmailStr, Field, field_validator


class RegistrationForm(BaseModel):
    """Applicant self-registration."""

    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    surname: str = Field(..., min_length=1, max_length=255)
    pnr: str | None = Field(
        default=None,
        pattern=r"^(\d{8}-\d{4})?$",
        description="Personal number, YYYYMMDD-XXXX",
    )
    email: EmailStr | None = None

    @field_validator("username", "name", "surname")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()

    @field_validator("pnr", "email", mode="before")
    @classmethod
    def blank_as_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class PrincipalResponse(BaseModel):
    """Authentication state of the current session."""

    authenticated: bool
    username: str | None = None
    role: str | None = None
