"""Committed visit change notifications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class ChangeType(str, Enum):
    CREATED = 'CREATED'
    UPDATED = 'UPDATED'
    DELETED = 'DELETED'


@dataclass(frozen=True)
class VisitChangedEvent:
    """Sent once per committed change of a visit, after the commit."""
    entity_id: UUID
    change_type: ChangeType
