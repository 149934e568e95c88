"""Person, role and availability models."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from recruitment.core.storage import Base


class Role(Base):
    """Capability label assigned to a person."""

    __tablename__ = "role"

    id: Mapped[int] = mapped_column(
        "role_id", Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)


class Person(Base):
    """Identity and credential holder."""

    __tablename__ = "person"

    id: Mapped[int] = mapped_column(
        "person_id", Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    surname: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pnr: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    username: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True
    )
    role_id: Mapped[int] = mapped_column(ForeignKey("role.role_id"), nullable=False)

    role: Mapped[Role] = relationship(lazy="joined")

    @property
    def full_name(self) -> str:
        return f"{self.name or ''} {self.surname or ''}".strip()


class Availability(Base):
    """Date interval during which a person can work."""

    __tablename__ = "availability"

    id: Mapped[int] = mapped_column(
        "availability_id", Integer, primary_key=True, autoincrement=True
    )
    person_id: Mapped[int] = mapped_column(
        ForeignKey("person.person_id"), nullable=False, index=True
    )
    from_date: Mapped[date] = mapped_column(Date, nullable=False)
    to_date: Mapped[date] = mapped_column(Date, nullable=False)
