"""Applicant registration."""

import logging

from sqlalchemy.exc import IntegrityError

from recruitment.core.exceptions import (
    ConfigurationError,
    EmailAlreadyTakenError,
    UsernameAlreadyTakenError,
)
from recruitment.core.security import hash_password
from recruitment.core.storage import SessionFactory, Storage, async_session
from recruitment.models.person import Person
from recruitment.repositories import PersonRepository, RoleRepository
from recruitment.schemas.auth import RegistrationForm

logger = logging.getLogger(__name__)


class RegistrationService:
    """Creates applicant accounts."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    async def register_applicant(self, form: RegistrationForm) -> Person:
        logger.info(
            f"Registration attempt for username: {form.username}, email: {form.email}"
        )
        async with self.session_factory() as session:
            people = PersonRepository(session)

            if await people.exists_by_username(form.username):
                logger.warning(f"Registration failed: username {form.username!r} taken")
                raise UsernameAlreadyTakenError(form.username)

            if form.email and await people.exists_by_email(form.email):
                logger.warning(f"Registration failed: email {form.email!r} taken")
                raise EmailAlreadyTakenError(form.email)

            role = await RoleRepository(session).find_by_name(Storage.APPLICANT_ROLE)
            if role is None:
                logger.error(
                    f"Applicant role {Storage.APPLICANT_ROLE!r} not found in database"
                )
                raise ConfigurationError("Applicant role not found in database")

            person = people.add(
                Person(
                    username=form.username,
                    password=hash_password(form.password),
                    name=form.name,
                    surname=form.surname,
                    pnr=form.pnr,
                    email=form.email,
                    role_id=role.id,
                )
            )
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if await people.find_by_username(form.username) is not None:
                    # Lost a race with a concurrent registration of the same username
                    logger.warning(f"Registration failed for {form.username!r}: {e}")
                    raise UsernameAlreadyTakenError(form.username) from e
                logger.error(f"Registration failed for {form.username!r}: {e}")
                raise

        logger.info(
            f"Registered new applicant: username={person.username}, id={person.id}"
        )
        return person

    async def is_username_taken(self, username: str) -> bool:
        async with self.session_factory() as session:
            return await PersonRepository(session).exists_by_username(username)

    async def is_email_taken(self, email: str | None) -> bool:
        if not email or not email.strip():
            return False
        async with self.session_factory() as session:
            return await PersonRepository(session).exists_by_email(email)


def create_registration_service(
    session_factory: SessionFactory | None = None,
) -> RegistrationService:
    return RegistrationService(session_factory or async_session)
