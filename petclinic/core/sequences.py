"""Persistent named counters (``core.Sequence``).

Used for human readable numbers such as visit numbers. Counters are never
reset and never reused; a value consumed by a transaction that is later
rolled back may leave a gap.
"""

from __future__ import annotations

import logging

from django.db import transaction
from django.db.models import F

from .models import Sequence

logger = logging.getLogger(__name__)


def next_value(name: str) -> int:
    """Increment the counter ``name`` and return the new value (first value is 1)."""
    with transaction.atomic():
        sequence, created = Sequence.objects.select_for_update().get_or_create(name=name)
        if created:
            logger.info('Sequence %s created', name)
        Sequence.objects.filter(pk=sequence.pk).update(value=F('value') + 1)
        sequence.refresh_from_db(fields=['value'])
    return sequence.value


def current_value(name: str) -> int:
    """Return the last value handed out for ``name`` without incrementing (0 if unused)."""
    value = Sequence.objects.filter(name=name).values_list('value', flat=True).first()
    return value or 0
