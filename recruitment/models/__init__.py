"""Database models."""

from recruitment.models.application import Application, ApplicationStatus
from recruitment.models.competence import Competence, CompetenceProfile
from recruitment.models.person import Availability, Person, Role

__all__ = [
    "Application",
    "ApplicationStatus",
    "Availability",
    "Competence",
    "CompetenceProfile",
    "Person",
    "Role",
]
