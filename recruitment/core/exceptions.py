"""Custom exceptions for the application."""

from datetime import date

from fastapi import HTTPException, status


class RecruitmentError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NotFoundError(RecruitmentError):
    """Raised when a referenced record does not exist."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidInputError(RecruitmentError):
    """Raised when caller input is rejected before any write."""


class InvalidCompetenceError(InvalidInputError):
    """Raised when a submitted competence id is not in the catalog."""

    def __init__(self, competence_id: int):
        self.competence_id = competence_id
        super().__init__(f"Invalid competence ID: {competence_id}")


class InvalidDateRangeError(InvalidInputError):
    """Raised when an availability period ends before it starts."""

    def __init__(self, from_date: date, to_date: date):
        self.from_date = from_date
        self.to_date = to_date
        super().__init__(
            f"Invalid date range: toDate must be after fromDate "
            f"({from_date.isoformat()} > {to_date.isoformat()})"
        )


class InvalidStatusError(InvalidInputError):
    """Raised when a status name does not match any application status."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid application status: {value}")


class VersionConflictError(RecruitmentError):
    """Raised when an optimistic-lock version check fails."""

    def __init__(
        self, application_id: int, expected: int | None, actual: int | None = None
    ):
        self.application_id = application_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Application {application_id} was modified by another user "
            f"(expected version {expected}, found {actual}). "
            "Please reload and try again."
        )


class UsernameAlreadyTakenError(RecruitmentError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already taken: {username}")


class EmailAlreadyTakenError(RecruitmentError):
    """Raised when registering an email that already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already taken: {email}")


class AuthenticationError(RecruitmentError):
    """Raised when authentication fails."""

    def __init__(self, detail: str = "Authentication failed"):
        self.detail = detail
        super().__init__(detail)


class StoreUnavailableError(RecruitmentError):
    """Raised when the database cannot be reached."""

    def __init__(
        self, detail: str = "Database is temporarily unavailable. Please try again later."
    ):
        self.detail = detail
        super().__init__(detail)


class ConfigurationError(RecruitmentError):
    """Raised when required reference data is missing."""


def unauthorized_exception(detail: str = "Not authenticated") -> HTTPException:
    """Return a 401 Unauthorized exception."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
    )


def forbidden_exception(detail: str = "Not enough permissions") -> HTTPException:
    """Return a 403 Forbidden exception."""
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=detail,
    )


def not_found_exception(detail: str = "Resource not found") -> HTTPException:
    """Return a 404 Not Found exception."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )
