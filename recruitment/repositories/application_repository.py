"""Application queries, including the version-checked status update."""

from datetime import UTC, datetime

from sqlalchemy import exists, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from recruitment.models.application import Application, ApplicationStatus


def _now() -> datetime:
    """Get current time as UTC naive datetime for DB storage."""
    return datetime.now(UTC).replace(tzinfo=None)


class ApplicationRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, application_id: int) -> Application | None:
        return await self.session.get(Application, application_id)

    async def reload(self, application_id: int) -> Application | None:
        """Fetch the row from the database, overwriting any cached state."""
        result = await self.session.execute(
            select(Application)
            .where(Application.id == application_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def find_by_person(self, person_id: int) -> Application | None:
        result = await self.session.execute(
            select(Application).where(Application.person_id == person_id)
        )
        return result.scalar_one_or_none()

    async def exists_by_person(self, person_id: int) -> bool:
        return bool(
            await self.session.scalar(
                select(exists().where(Application.person_id == person_id))
            )
        )

    def add(self, application: Application) -> Application:
        self.session.add(application)
        return application

    def _filtered(self, status: ApplicationStatus | None):
        query = select(Application)
        if status is not None:
            query = query.where(Application.status == status)
        return query

    async def find_all(self, status: ApplicationStatus | None = None) -> list[Application]:
        """All applications, newest first, optionally restricted to one status."""
        result = await self.session.execute(
            self._filtered(status).order_by(
                Application.created_at.desc(), Application.id.desc()
            )
        )
        return list(result.scalars().all())

    async def find_page(
        self, offset: int, limit: int, status: ApplicationStatus | None = None
    ) -> tuple[list[Application], int]:
        """One page of applications, newest first, and the total match count."""
        count_query = select(func.count()).select_from(Application)
        if status is not None:
            count_query = count_query.where(Application.status == status)
        total = await self.session.scalar(count_query) or 0

        result = await self.session.execute(
            self._filtered(status)
            .order_by(Application.created_at.desc(), Application.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all()), total

    async def compare_and_set_status(
        self,
        application_id: int,
        new_status: ApplicationStatus,
        expected_version: int | None,
    ) -> int:
        """Write the new status and bump the version in one statement.

        With ``expected_version`` the row only matches while its stored version
        is still that value. Returns the affected-row count; 0 means another
        writer got there first.
        """
        statement = update(Application).where(Application.id == application_id)
        if expected_version is not None:
            statement = statement.where(Application.version == expected_version)
        statement = statement.values(
            status=new_status,
            updated_at=_now(),
            version=Application.version + 1,
        ).execution_options(synchronize_session=False)

        result = await self.session.execute(statement)
        return result.rowcount
