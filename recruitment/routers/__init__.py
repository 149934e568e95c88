"""API routers."""

from recruitment.routers.applicant import router as applicant_router
from recruitment.routers.auth import router as auth_router
from recruitment.routers.recruiter import router as recruiter_router
from recruitment.routers.registration import router as registration_router

__all__ = [
    "applicant_router",
    "auth_router",
    "recruiter_router",
    "registration_router",
]
