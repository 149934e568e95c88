"""Job application model."""

import enum
from datetime import UTC, datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from recruitment.core.exceptions import InvalidStatusError
from recruitment.core.storage import Base
from recruitment.models.person import Person


def _utc_now() -> datetime:
    """Return current UTC time as timezone-naive datetime for DB storage."""
    return datetime.now(UTC).replace(tzinfo=None)


class ApplicationStatus(str, enum.Enum):
    """Review state of an application."""

    UNHANDLED = "UNHANDLED"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"

    @classmethod
    def parse(cls, value: "ApplicationStatus | str") -> "ApplicationStatus":
        """Resolve a status from an enum member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise InvalidStatusError(value)


class Application(Base):
    """The single job application owned by one person.

    ``version`` is the optimistic-lock counter: it starts at 1 and every
    persisted mutation of the row increments it by exactly one.
    """

    __tablename__ = "application"

    id: Mapped[int] = mapped_column(
        "application_id", Integer, primary_key=True, autoincrement=True
    )
    person_id: Mapped[int] = mapped_column(
        ForeignKey("person.person_id"), nullable=False, unique=True
    )
    status: Mapped[ApplicationStatus] = mapped_column(
        Enum(ApplicationStatus, native_enum=False, length=20),
        nullable=False,
        default=ApplicationStatus.UNHANDLED,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=_utc_now, nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=_utc_now, onupdate=_utc_now, nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    person: Mapped[Person] = relationship(lazy="joined")

    __mapper_args__ = {"version_id_col": version}
