"""
Automatic nurse assignment for new visits.

Runs once per committed visit creation (see ``visits.signals``) and gives a
visit without a nurse the first nurse of the roster who has no overlapping
visit.

Architecture Rules:
- Only committed data is read; the engine runs after the creating commit.
- The engine works in its own transaction. It can neither roll back the
  creation nor be rolled back by it.
- An existing assignment is never overwritten.
- Any failure is logged and swallowed; the visit then simply stays
  unassigned. There are no retries.

Known gap: two overlapping visits created at nearly the same moment may both
be processed before either assignment is committed, and then both get the
same nurse. There is no lock across concurrent assignments.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Iterable
from uuid import UUID

from django.conf import settings
from django.db import transaction

from petclinic.core.models import User
from petclinic.core.staff import find_all_nurses, staff_display_name
from petclinic.visits.models import Visit
from petclinic.visits.scheduling import find_overlapping_visits

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helper Functions
# ---------------------------------------------------------------------------

def _nurse_buffer() -> timedelta | None:
    minutes = getattr(settings, 'VISIT_NURSE_BUFFER_MINUTES', 0) or 0
    if minutes <= 0:
        return None
    return timedelta(minutes=minutes)


def load_visit_with_nurse(visit_id: UUID | str) -> Visit:
    """Fresh read of a visit including its assigned nurse.

    Raises:
        Visit.DoesNotExist: no visit with this id.
    """
    return Visit.objects.select_related('assigned_nurse').get(pk=visit_id)


# ---------------------------------------------------------------------------
# Busy Set & Candidate Selection
# ---------------------------------------------------------------------------

def busy_nurse_ids(visit: Visit) -> set[int]:
    """
    Nurses already assigned to a visit overlapping ``visit``.

    The query includes ``visit`` itself; it contributes nothing as long as it
    has no nurse.

    Args:
        visit: The visit to be staffed

    Returns:
        Set of nurse ids. Empty set means every nurse is free.
    """
    overlapping = find_overlapping_visits(
        visit.visit_start,
        visit.visit_end,
        buffer=_nurse_buffer(),
    )
    return {
        other.assigned_nurse_id
        for other in overlapping
        if other.assigned_nurse_id is not None
    }


def select_available_nurse(roster: Iterable[User], busy_ids: set[int]) -> User | None:
    """
    Pick the first nurse of ``roster`` that is not busy.

    Roster order alone decides between free nurses; availability length or
    workload are not considered. Returns None if every nurse is busy.
    """
    for nurse in roster:
        if nurse.id not in busy_ids:
            return nurse
    return None


# ---------------------------------------------------------------------------
# Assignment
# ---------------------------------------------------------------------------

def assign_available_nurse(visit: Visit) -> User | None:
    """
    Assign the first free nurse to ``visit`` and save it.

    Must be called inside the engine's transaction with a freshly loaded visit.
    Leaves the visit untouched if no nurse is free.

    Returns:
        The assigned nurse, or None.
    """
    busy = busy_nurse_ids(visit)
    nurse = select_available_nurse(find_all_nurses(), busy)

    if nurse is None:
        logger.info(
            'No nurse available for visit %s (%s - %s), %d busy',
            visit.visit_number,
            visit.visit_start.isoformat(),
            visit.visit_end.isoformat(),
            len(busy),
        )
        return None

    logger.info(
        'Available nurse found: %s. Assigning nurse to visit: %s',
        staff_display_name(nurse),
        visit.visit_number,
    )
    visit.assigned_nurse = nurse
    visit.save(update_fields=['assigned_nurse', 'updated_at'])
    return nurse


def assign_nurse_to_visit_automatically(visit_id: UUID | str) -> User | None:
    """
    Entry point for a committed visit creation.

    1. Re-load the visit with its nurse in a new transaction.
    2. Stop if a nurse is already assigned.
    3. Otherwise assign the first free nurse (if any).

    Never raises: errors are logged and the visit stays as it is.

    Returns:
        The nurse assigned by this call, or None.
    """
    try:
        with transaction.atomic():
            visit = load_visit_with_nurse(visit_id)

            if visit.assigned_nurse_id is not None:
                logger.info(
                    'Nurse already assigned to visit: %s. No automatic assignment needed.',
                    visit.visit_number,
                )
                return None

            return assign_available_nurse(visit)
    except Exception:
        logger.exception('Error automatically assigning nurse to visit: %s', visit_id)
        return None
