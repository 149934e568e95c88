"""Recruiter list filtering."""

import logging

from recruitment.core.exceptions import InvalidStatusError
from recruitment.models.application import ApplicationStatus

logger = logging.getLogger(__name__)


def parse_status_filter(raw: str | None) -> ApplicationStatus | None:
    """Turn a ``status`` query value into a filter.

    Blank or unknown values mean "no filter" so a bad link still shows the
    full list.
    """
    if raw is None or not raw.strip():
        return None
    try:
        return ApplicationStatus.parse(raw)
    except InvalidStatusError:
        logger.warning(f"Ignoring unknown status filter: {raw!r}")
        return None
