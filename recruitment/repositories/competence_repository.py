"""Competence catalog, competence profile and availability queries."""

from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from recruitment.models.competence import Competence, CompetenceProfile
from recruitment.models.person import Availability


class CompetenceRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> list[Competence]:
        result = await self.session.execute(select(Competence).order_by(Competence.id))
        return list(result.scalars().all())

    async def find_by_ids(self, competence_ids: Iterable[int]) -> dict[int, Competence]:
        """Return the catalog entries for the given ids, keyed by id."""
        ids = set(competence_ids)
        if not ids:
            return {}
        result = await self.session.execute(
            select(Competence).where(Competence.id.in_(ids))
        )
        return {competence.id: competence for competence in result.scalars().all()}


class CompetenceProfileRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_person(self, person_id: int) -> list[CompetenceProfile]:
        result = await self.session.execute(
            select(CompetenceProfile)
            .where(CompetenceProfile.person_id == person_id)
            .order_by(CompetenceProfile.id)
        )
        return list(result.scalars().all())

    async def delete_by_person(self, person_id: int) -> int:
        result = await self.session.execute(
            delete(CompetenceProfile).where(CompetenceProfile.person_id == person_id)
        )
        return result.rowcount

    def add_all(self, profiles: list[CompetenceProfile]) -> None:
        self.session.add_all(profiles)


class AvailabilityRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_person(self, person_id: int) -> list[Availability]:
        result = await self.session.execute(
            select(Availability)
            .where(Availability.person_id == person_id)
            .order_by(Availability.from_date, Availability.id)
        )
        return list(result.scalars().all())

    async def delete_by_person(self, person_id: int) -> int:
        result = await self.session.execute(
            delete(Availability).where(Availability.person_id == person_id)
        )
        return result.rowcount

    def add_all(self, availabilities: list[Availability]) -> None:
        self.session.add_all(availabilities)
