"""Core application components."""

from recruitment.core.config import settings
from recruitment.core.exceptions import (
    AuthenticationError,
    NotFoundError,
    RecruitmentError,
    VersionConflictError,
)
from recruitment.core.storage import Base, Storage, async_session

__all__ = [
    "AuthenticationError",
    "Base",
    "NotFoundError",
    "RecruitmentError",
    "Storage",
    "VersionConflictError",
    "async_session",
    "settings",
]
