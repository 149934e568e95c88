"""Session-bound data access helpers."""

from recruitment.repositories.application_repository import ApplicationRepository
from recruitment.repositories.competence_repository import (
    AvailabilityRepository,
    CompetenceProfileRepository,
    CompetenceRepository,
)
from recruitment.repositories.person_repository import PersonRepository, RoleRepository

__all__ = [
    "ApplicationRepository",
    "AvailabilityRepository",
    "CompetenceProfileRepository",
    "CompetenceRepository",
    "PersonRepository",
    "RoleRepository",
]
