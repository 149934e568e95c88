"""Pytest configuration and fixtures."""

import os
import sys
import tempfile

import pytest
import pytest_asyncio

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing recruitment modules
_API_DB_PATH = os.path.join(tempfile.gettempdir(), "recruitment_api_test.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_API_DB_PATH}"
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ["COOKIE_SECURE"] = "false"
os.environ["SEED_REFERENCE_DATA"] = "true"
os.environ["PAGE_SIZE"] = "2"

TEST_COMPETENCES = ["ticket sales", "lotteries", "roller coaster operation"]


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """Session factory bound to a fresh, seeded SQLite database."""
    from recruitment.core.storage import Storage, build_engine, build_session_factory

    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'service_test.db'}")
    await Storage.init_models(engine)
    factory = build_session_factory(engine)
    await Storage.seed_reference_data(TEST_COMPETENCES, factory)
    yield factory
    await engine.dispose()


@pytest_asyncio.fixture
async def competence_ids(session_factory):
    """Catalog competence ids keyed by name."""
    from recruitment.repositories import CompetenceRepository

    async with session_factory() as session:
        competences = await CompetenceRepository(session).find_all()
    return {competence.name: competence.id for competence in competences}


@pytest.fixture
def application_service(session_factory):
    from recruitment.services.application_service import ApplicationService

    return ApplicationService(session_factory, page_size=2)


@pytest.fixture
def registration_service(session_factory):
    from recruitment.services.registration_service import RegistrationService

    return RegistrationService(session_factory)


@pytest.fixture
def auth_service(session_factory):
    from recruitment.services.auth_service import AuthService

    return AuthService(session_factory)


def _registration_form(username: str = "applicant1", **overrides):
    from recruitment.schemas.auth import RegistrationForm

    data = {
        "username": username,
        "password": "secret123",
        "name": "Ada",
        "surname": "Lovelace",
        "pnr": "19851210-1234",
        "email": f"{username}@example.com",
    }
    data.update(overrides)
    return RegistrationForm(**data)


@pytest.fixture
def registration_form():
    """Factory for valid registration forms."""
    return _registration_form


@pytest_asyncio.fixture
async def applicant(registration_service):
    """A registered applicant with no application yet."""
    return await registration_service.register_applicant(_registration_form())


@pytest.fixture
def sample_application_form(competence_ids):
    """Two competences and one availability period."""
    from recruitment.schemas.application import ApplicationForm

    return ApplicationForm(
        competences=[
            {"competence_id": competence_ids["ticket sales"], "years_of_experience": "3.5"},
            {"competence_id": competence_ids["lotteries"], "years_of_experience": "1"},
        ],
        availabilities=[
            {"from_date": "2026-06-01", "to_date": "2026-08-31"},
        ],
    )


# ---------------------------------------------------------------------------
# API fixtures
# ---------------------------------------------------------------------------


def _sync_engine():
    from sqlalchemy import create_engine

    return create_engine(f"sqlite:///{_API_DB_PATH}")


@pytest.fixture
def test_client():
    """Test client against an empty database, seeded by the app lifespan."""
    from fastapi.testclient import TestClient

    import recruitment.models  # noqa: F401
    from recruitment.core.storage import Base
    from recruitment.main import app

    engine = _sync_engine()
    Base.metadata.drop_all(engine)
    engine.dispose()

    with TestClient(app) as client:
        yield client


@pytest.fixture
def create_recruiter():
    """Insert a recruiter account directly; recruiters cannot self-register."""
    from sqlalchemy import select
    from sqlalchemy.orm import Session

    from recruitment.core.security import hash_password
    from recruitment.models import Person, Role

    def _create(username: str = "recruiter1", password: str = "recruit123") -> str:
        engine = _sync_engine()
        with Session(engine) as session:
            role = session.execute(
                select(Role).where(Role.name == "recruiter")
            ).scalar_one()
            session.add(
                Person(
                    username=username,
                    password=hash_password(password),
                    name="Rita",
                    surname="Recruiter",
                    email=f"{username}@example.com",
                    role_id=role.id,
                )
            )
            session.commit()
        engine.dispose()
        return username

    return _create


def _login(client, username: str, password: str):
    return client.post("/auth/login", json={"username": username, "password": password})


@pytest.fixture
def login():
    """Log a client in through the API."""
    return _login


@pytest.fixture
def register_and_login():
    """Register an applicant through the API and log them in."""
    return _register_and_login


def _register_and_login(client, username: str = "applicant1", password: str = "secret123"):
    response = client.post(
        "/register",
        json={
            "username": username,
            "password": password,
            "name": "Ada",
            "surname": "Lovelace",
            "email": f"{username}@example.com",
        },
    )
    assert response.status_code == 201
    assert _login(client, username, password).status_code == 200
    return response.json()
