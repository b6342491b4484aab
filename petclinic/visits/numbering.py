"""Visit number generation.

Format: ``V-<year of visit_start>-<counter, zero padded to 6 digits>``.
The counter (``settings.VISIT_NUMBER_SEQUENCE``) is shared across all years
and never reset, so numbers are unique and increasing but may have gaps.
"""

from __future__ import annotations

import logging
from datetime import datetime

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from petclinic.core.sequences import next_value

from .exceptions import InvalidVisitData, VisitNumberingError

logger = logging.getLogger(__name__)


def format_visit_number(year: int, counter: int) -> str:
    return f"V-{year}-{counter:06d}"


def _visit_year(visit_start: datetime) -> int:
    if timezone.is_aware(visit_start):
        return timezone.localtime(visit_start).year
    return visit_start.year


def generate_visit_number(visit_start: datetime) -> str:
    """Consume the next counter value and build a visit number from it.

    Raises:
        VisitNumberingError: the counter could not be read or incremented.
    """
    sequence_name = settings.VISIT_NUMBER_SEQUENCE
    try:
        counter = next_value(sequence_name)
    except DatabaseError as exc:
        logger.error('Sequence %s unavailable, visit cannot be numbered', sequence_name)
        raise VisitNumberingError(sequence_name) from exc
    return format_visit_number(_visit_year(visit_start), counter)


def assign_visit_number(visit) -> None:
    """Give a visit that is about to be inserted its number.

    Only visits being added are numbered; existing visits keep theirs.
    """
    if not visit._state.adding:
        return
    if visit.visit_start is None:
        raise InvalidVisitData("visit_start is required to number a visit", field="visit_start")
    visit.visit_number = generate_visit_number(visit.visit_start)
    logger.debug('Visit number %s assigned', visit.visit_number)
