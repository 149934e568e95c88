"""Database connection and storage utilities."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from recruitment.core.config import settings

logger = logging.getLogger(__name__)

SessionFactory = async_sessionmaker[AsyncSession]


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given URL.

    SQLite connections are not pooled and get foreign keys switched on.
    """
    if database_url.startswith("sqlite"):
        new_engine = create_async_engine(
            database_url,
            echo=echo,
            poolclass=NullPool,
            connect_args={"timeout": 30},
        )

        @event.listens_for(new_engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return new_engine

    return create_async_engine(database_url, echo=echo, pool_pre_ping=True)


def build_session_factory(bind: AsyncEngine) -> SessionFactory:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


engine: AsyncEngine = build_engine(settings.database_url, settings.database_echo)

async_session: SessionFactory = build_session_factory(engine)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def get_session_factory() -> SessionFactory:
    """FastAPI dependency returning the session factory."""
    return async_session


class Storage:
    """Schema and reference-data bootstrap."""

    APPLICANT_ROLE = "applicant"
    RECRUITER_ROLE = "recruiter"

    @staticmethod
    async def init_models(bind: AsyncEngine | None = None) -> None:
        """Create all tables that do not exist yet."""
        import recruitment.models  # noqa: F401

        async with (bind or engine).begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @staticmethod
    async def seed_reference_data(
        competences: Iterable[str],
        session_factory: SessionFactory | None = None,
    ) -> None:
        """Insert missing roles and catalog competences."""
        from recruitment.models import Competence, Role

        factory = session_factory or async_session
        async with factory() as session, session.begin():
            existing_roles = set(
                (await session.execute(select(Role.name))).scalars().all()
            )
            for name in (Storage.APPLICANT_ROLE, Storage.RECRUITER_ROLE):
                if name not in existing_roles:
                    session.add(Role(name=name))
                    logger.info(f"Seeded role: {name}")

            existing_competences = set(
                (await session.execute(select(Competence.name))).scalars().all()
            )
            for name in competences:
                if name not in existing_competences:
                    session.add(Competence(name=name))
                    existing_competences.add(name)
                    logger.info(f"Seeded competence: {name}")
