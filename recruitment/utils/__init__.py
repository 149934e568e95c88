"""Utility functions and classes."""

from recruitment.utils.filters import parse_status_filter
from recruitment.utils.validators import (
    check_availability_ranges,
    check_competences_known,
    present_availabilities,
    present_competences,
)

__all__ = [
    "check_availability_ranges",
    "check_competences_known",
    "parse_status_filter",
    "present_availabilities",
    "present_competences",
]
