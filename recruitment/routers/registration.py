"""Registration router for new applicants."""

from fastapi import APIRouter, Depends, status

from recruitment.routers.dependencies import get_registration_service
from recruitment.schemas.auth import RegistrationForm
from recruitment.services.registration_service import RegistrationService

router = APIRouter(tags=["registration"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    form: RegistrationForm,
    registration: RegistrationService = Depends(get_registration_service),
):
    """Create an applicant account."""
    person = await registration.register_applicant(form)
    return {
        "person_id": person.id,
        "username": person.username,
        "message": "Registration successful! Please login.",
    }
