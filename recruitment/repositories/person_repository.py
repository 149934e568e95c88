"""Person and role queries."""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from recruitment.models.person import Person, Role


class RoleRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_name(self, name: str) -> Role | None:
        result = await self.session.execute(select(Role).where(Role.name == name))
        return result.scalar_one_or_none()


class PersonRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def lock(self, person_id: int) -> Person | None:
        """Load a person with a row lock held until the transaction ends."""
        result = await self.session.execute(
            select(Person)
            .where(Person.id == person_id)
            .with_for_update(of=Person)
        )
        return result.scalar_one_or_none()

    async def find_by_username(self, username: str) -> Person | None:
        result = await self.session.execute(
            select(Person).where(Person.username == username)
        )
        return result.scalar_one_or_none()

    async def exists_by_username(self, username: str) -> bool:
        return bool(
            await self.session.scalar(
                select(exists().where(Person.username == username))
            )
        )

    async def exists_by_email(self, email: str) -> bool:
        return bool(
            await self.session.scalar(select(exists().where(Person.email == email)))
        )

    def add(self, person: Person) -> Person:
        self.session.add(person)
        return person
