"""Validation logic for application submissions."""

from collections.abc import Iterable, Mapping

from recruitment.core.exceptions import InvalidCompetenceError, InvalidDateRangeError
from recruitment.schemas.application import (
    ApplicationForm,
    AvailabilityForm,
    CompetenceForm,
)


def present_competences(form: ApplicationForm) -> list[CompetenceForm]:
    """Competence entries with both an id and a number of years."""
    return [
        entry
        for entry in form.competences
        if entry.competence_id is not None and entry.years_of_experience is not None
    ]


def present_availabilities(form: ApplicationForm) -> list[AvailabilityForm]:
    """Availability entries with both dates filled in."""
    return [
        entry
        for entry in form.availabilities
        if entry.from_date is not None and entry.to_date is not None
    ]


def check_availability_ranges(availabilities: Iterable[AvailabilityForm]) -> None:
    """Reject the first period whose end date lies before its start date."""
    for entry in availabilities:
        if not entry.is_valid():
            raise InvalidDateRangeError(entry.from_date, entry.to_date)


def check_competences_known(
    competences: Iterable[CompetenceForm], catalog: Mapping[int, object]
) -> None:
    """Reject the first competence id missing from the catalog."""
    for entry in competences:
        if entry.competence_id not in catalog:
            raise InvalidCompetenceError(entry.competence_id)
