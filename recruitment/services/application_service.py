"""Application service: submission, status review and recruiter projections."""

import logging
import math

from recruitment.core.config import settings
from recruitment.core.exceptions import (
    InvalidInputError,
    NotFoundError,
    VersionConflictError,
)
from recruitment.core.storage import SessionFactory, async_session
from recruitment.models.application import Application, ApplicationStatus
from recruitment.models.competence import Competence, CompetenceProfile
from recruitment.models.person import Availability
from recruitment.repositories import (
    ApplicationRepository,
    AvailabilityRepository,
    CompetenceProfileRepository,
    CompetenceRepository,
    PersonRepository,
)
from recruitment.schemas.application import (
    ApplicationDetails,
    ApplicationForm,
    ApplicationListItem,
    ApplicationPage,
    AvailabilityDetail,
    CompetenceDetail,
)
from recruitment.services.versioning import (
    ExpectedVersion,
    Unconditional,
    VersionCheck,
)
from recruitment.utils.validators import (
    check_availability_ranges,
    check_competences_known,
    present_availabilities,
    present_competences,
)

logger = logging.getLogger(__name__)


class ApplicationService:
    """Core service for job applications."""

    def __init__(self, session_factory: SessionFactory, page_size: int = 10):
        self.session_factory = session_factory
        self.page_size = page_size

    async def get_all_competences(self) -> list[Competence]:
        async with self.session_factory() as session:
            return await CompetenceRepository(session).find_all()

    async def submit_application(
        self, person_id: int, form: ApplicationForm
    ) -> Application:
        """Replace a person's competences and availability and ensure an application.

        Everything is validated before the first write and all writes share one
        transaction, so a failure leaves the previous submission in place.
        An existing application keeps its id, status and version.
        """
        competences = present_competences(form)
        availabilities = present_availabilities(form)
        logger.info(
            f"Submitting application for person {person_id}: "
            f"{len(competences)} competences, {len(availabilities)} availabilities"
        )

        try:
            check_availability_ranges(availabilities)
        except InvalidInputError as e:
            logger.warning(f"Rejected submission for person {person_id}: {e.message}")
            raise

        async with self.session_factory() as session, session.begin():
            # Serializes concurrent submissions for one person so the
            # find-or-create below never races on the unique person_id.
            if await PersonRepository(session).lock(person_id) is None:
                raise NotFoundError("Person", person_id)

            catalog = await CompetenceRepository(session).find_by_ids(
                entry.competence_id for entry in competences
            )
            try:
                check_competences_known(competences, catalog)
            except InvalidInputError as e:
                logger.warning(
                    f"Rejected submission for person {person_id}: {e.message}"
                )
                raise

            profiles = CompetenceProfileRepository(session)
            periods = AvailabilityRepository(session)
            await profiles.delete_by_person(person_id)
            await periods.delete_by_person(person_id)
            logger.debug(
                f"Cleared competence profiles and availabilities for person {person_id}"
            )

            profiles.add_all(
                [
                    CompetenceProfile(
                        person_id=person_id,
                        competence_id=entry.competence_id,
                        years_of_experience=entry.years_of_experience,
                    )
                    for entry in competences
                ]
            )
            periods.add_all(
                [
                    Availability(
                        person_id=person_id,
                        from_date=entry.from_date,
                        to_date=entry.to_date,
                    )
                    for entry in availabilities
                ]
            )

            applications = ApplicationRepository(session)
            application = await applications.find_by_person(person_id)
            if application is None:
                application = applications.add(
                    Application(person_id=person_id, status=ApplicationStatus.UNHANDLED)
                )
            await session.flush()

        logger.info(
            f"Application saved: id={application.id}, person={person_id}, "
            f"status={application.status.value}"
        )
        return application

    async def update_status(
        self,
        application_id: int,
        new_status: ApplicationStatus | str,
        check: VersionCheck | None = None,
    ) -> Application:
        """Move an application to ``new_status``.

        With ``ExpectedVersion`` the write only happens while the stored version
        still matches; otherwise ``VersionConflictError`` is raised and nothing
        is written. Returns the row as persisted, including its new version.
        """
        status = ApplicationStatus.parse(new_status)
        check = check or Unconditional()

        async with self.session_factory() as session:
            repository = ApplicationRepository(session)
            application = await repository.reload(application_id)
            if application is None:
                raise NotFoundError("Application", application_id)

            if (
                isinstance(check, ExpectedVersion)
                and check.version != application.version
            ):
                logger.warning(
                    f"Version conflict on application {application_id}: "
                    f"expected {check.version}, stored {application.version}"
                )
                raise VersionConflictError(
                    application_id, check.version, application.version
                )

            updated = await repository.compare_and_set_status(
                application_id, status, check.expected
            )
            if updated == 0:
                await session.rollback()
                current = await repository.reload(application_id)
                if current is None:
                    raise NotFoundError("Application", application_id)
                logger.warning(
                    f"Version conflict on application {application_id}: "
                    f"concurrent write moved it to version {current.version}"
                )
                raise VersionConflictError(
                    application_id, check.expected, current.version
                )
            await session.commit()

            application = await repository.reload(application_id)

        logger.info(
            f"Application {application_id} status set to {status.value} "
            f"(version {application.version})"
        )
        return application

    async def set_status(
        self, application_id: int, new_status: ApplicationStatus | str
    ) -> Application:
        """Status update without a version check."""
        return await self.update_status(application_id, new_status, Unconditional())

    async def get_application(self, application_id: int) -> Application | None:
        async with self.session_factory() as session:
            return await ApplicationRepository(session).get(application_id)

    async def get_application_by_person(self, person_id: int) -> Application | None:
        async with self.session_factory() as session:
            return await ApplicationRepository(session).find_by_person(person_id)

    async def has_application(self, person_id: int) -> bool:
        async with self.session_factory() as session:
            return await ApplicationRepository(session).exists_by_person(person_id)

    async def get_application_details(self, application_id: int) -> ApplicationDetails:
        """Application with its owner and full competence/availability breakdown."""
        async with self.session_factory() as session:
            application = await ApplicationRepository(session).get(application_id)
            if application is None:
                logger.warning(f"Application not found for id={application_id}")
                raise NotFoundError("Application", application_id)

            person = application.person
            profiles = await CompetenceProfileRepository(session).find_by_person(
                person.id
            )
            availabilities = await AvailabilityRepository(session).find_by_person(
                person.id
            )

        return ApplicationDetails(
            id=application.id,
            person_name=person.full_name,
            person_email=person.email,
            person_pnr=person.pnr,
            status=application.status,
            created_at=application.created_at,
            updated_at=application.updated_at,
            version=application.version,
            competences=[
                CompetenceDetail(
                    competence_name=profile.competence.name,
                    years_of_experience=profile.years_of_experience,
                )
                for profile in profiles
            ],
            availabilities=[
                AvailabilityDetail(from_date=period.from_date, to_date=period.to_date)
                for period in availabilities
            ],
        )

    async def list_applications(
        self, status: ApplicationStatus | None = None
    ) -> list[ApplicationListItem]:
        async with self.session_factory() as session:
            applications = await ApplicationRepository(session).find_all(status)
        return [self._to_list_item(application) for application in applications]

    async def list_applications_page(
        self, page: int, status: ApplicationStatus | None = None
    ) -> ApplicationPage:
        """One fixed-size, 0-indexed page of the application list."""
        if page < 0:
            raise InvalidInputError(f"Page index must not be negative: {page}")

        async with self.session_factory() as session:
            applications, total = await ApplicationRepository(session).find_page(
                offset=page * self.page_size, limit=self.page_size, status=status
            )

        total_pages = math.ceil(total / self.page_size)
        return ApplicationPage(
            content=[self._to_list_item(application) for application in applications],
            page=page,
            size=self.page_size,
            total_elements=total,
            total_pages=total_pages,
            has_next=page + 1 < total_pages,
            has_previous=page > 0 and total > 0,
        )

    @staticmethod
    def _to_list_item(application: Application) -> ApplicationListItem:
        return ApplicationListItem(
            id=application.id,
            person_name=application.person.full_name,
            status=application.status,
            created_at=application.created_at,
        )


def create_application_service(
    session_factory: SessionFactory | None = None,
) -> ApplicationService:
    """Factory function to create application service."""
    return ApplicationService(session_factory or async_session, settings.page_size)
