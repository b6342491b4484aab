"""
Visit-specific exceptions.

These exceptions are raised by the visit services and should be translated
to appropriate DRF responses in the views.
"""

from __future__ import annotations

from typing import Any


class VisitError(Exception):
    """Base exception for all visit-related errors."""
    pass


class VisitNumberingError(VisitError):
    """
    Raised when no visit number could be obtained for a new visit.

    The surrounding save is aborted: a visit is never stored without a number.
    """
    def __init__(self, sequence_name: str, message: str = "Visit number could not be generated"):
        self.sequence_name = sequence_name
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            'detail': str(self),
            'sequence': self.sequence_name,
        }


class InvalidVisitData(VisitError):
    """
    Raised when a visit cannot be processed with the data it carries
    (e.g. no visit_start to derive the visit number from).
    """
    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = {'detail': str(self)}
        if self.field:
            result['field'] = self.field
        return result
