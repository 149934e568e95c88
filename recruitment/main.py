"""Recruitment portal - applicant submissions and recruiter review."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.sessions import SessionMiddleware

from recruitment.core.config import settings
from recruitment.core.exceptions import (
    AuthenticationError,
    EmailAlreadyTakenError,
    InvalidInputError,
    NotFoundError,
    RecruitmentError,
    StoreUnavailableError,
    UsernameAlreadyTakenError,
    VersionConflictError,
)
from recruitment.core.storage import Storage
from recruitment.routers import (
    applicant_router,
    auth_router,
    recruiter_router,
    registration_router,
)

log_level = settings.log_level.upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Initializing application...")
    await Storage.init_models()

    if settings.seed_reference_data:
        logger.info("Seeding reference data...")
        await Storage.seed_reference_data(settings.seed_competences)

    logger.info("Application initialized")

    yield

    logger.info("Shutdown complete")


app = FastAPI(
    title="Recruitment Portal",
    description="Job applications for applicants and recruiters",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    session_cookie="recruitment_session",
    max_age=settings.session_max_age,
    same_site="lax",
    https_only=settings.cookie_secure,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(registration_router)
app.include_router(applicant_router)
app.include_router(recruiter_router)


_STATUS_CODES: list[tuple[type[RecruitmentError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (VersionConflictError, status.HTTP_409_CONFLICT),
    (UsernameAlreadyTakenError, status.HTTP_409_CONFLICT),
    (EmailAlreadyTakenError, status.HTTP_409_CONFLICT),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


@app.exception_handler(RecruitmentError)
async def recruitment_error_handler(request: Request, exc: RecruitmentError):
    """Turn domain errors into JSON error responses."""
    for error_type, status_code in _STATUS_CODES:
        if isinstance(exc, error_type):
            logger.info(
                f"{request.method} {request.url.path} -> {status_code}: {exc.message}"
            )
            return JSONResponse(status_code=status_code, content={"detail": exc.message})

    logger.error(f"Unhandled application error on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred. Please try again later."},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


@app.get("/")
async def api_info():
    """API information endpoint."""
    return {
        "message": "Recruitment Portal API",
        "version": "1.0.0",
        "docs": "/docs",
        "status": "active",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "recruitment"}
