"""Competence catalog and competence profile models."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from recruitment.core.storage import Base


class Competence(Base):
    """Named skill from the static catalog."""

    __tablename__ = "competence"

    id: Mapped[int] = mapped_column(
        "competence_id", Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class CompetenceProfile(Base):
    """A person's claimed competence with years of experience."""

    __tablename__ = "competence_profile"

    id: Mapped[int] = mapped_column(
        "competence_profile_id", Integer, primary_key=True, autoincrement=True
    )
    person_id: Mapped[int] = mapped_column(
        ForeignKey("person.person_id"), nullable=False, index=True
    )
    competence_id: Mapped[int] = mapped_column(
        ForeignKey("competence.competence_id"), nullable=False
    )
    years_of_experience: Mapped[Decimal] = mapped_column(
        Numeric(4, 2), nullable=False
    )

    competence: Mapped[Competence] = relationship(lazy="joined")
