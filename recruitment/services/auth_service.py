"""Authentication against the person store."""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from recruitment.core.exceptions import AuthenticationError, StoreUnavailableError
from recruitment.core.security import Principal, verify_password
from recruitment.core.storage import SessionFactory, async_session
from recruitment.models.person import Person
from recruitment.repositories import PersonRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """What the identity store knows about a username."""

    username: str
    password_hash: str
    role: str

    def principal(self) -> Principal:
        return Principal(username=self.username, role=self.role)


class AuthService:
    """Resolves usernames to credentials and checks passwords."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    async def load_credentials(self, username: str) -> Credentials:
        """Look up a username; never sees a plaintext password."""
        logger.info(f"Authentication attempt for username: {username}")
        try:
            async with self.session_factory() as session:
                person = await PersonRepository(session).find_by_username(username)
        except SQLAlchemyError as e:
            logger.error(
                f"Database unavailable during authentication for {username!r}: {e}"
            )
            raise StoreUnavailableError() from e

        if person is None:
            logger.warning(f"Authentication failed: user not found - {username}")
            raise AuthenticationError("Invalid username or password")

        logger.info(f"User loaded: username={person.username}, role={person.role.name}")
        return Credentials(
            username=person.username,
            password_hash=person.password,
            role=person.role.name,
        )

    async def authenticate(self, username: str, password: str) -> Principal:
        """Verify a username/password pair and return the session principal."""
        credentials = await self.load_credentials(username)
        if not verify_password(password, credentials.password_hash):
            logger.warning(f"Authentication failed: bad password - {username}")
            raise AuthenticationError("Invalid username or password")
        logger.info(f"Login successful: {username} ({credentials.role})")
        return credentials.principal()

    async def get_person(self, username: str) -> Person:
        """The person behind a logged-in session."""
        async with self.session_factory() as session:
            person = await PersonRepository(session).find_by_username(username)
        if person is None:
            raise AuthenticationError("Session user no longer exists")
        return person


def create_auth_service(session_factory: SessionFactory | None = None) -> AuthService:
    return AuthService(session_factory or async_session)
