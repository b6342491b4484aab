"""
Visits Services Module.

This package contains service-layer logic for the visits app:
- nurse_assignment: automatic nurse assignment after a visit has been created
"""

from petclinic.visits.services.nurse_assignment import (
    assign_available_nurse,
    assign_nurse_to_visit_automatically,
    busy_nurse_ids,
    load_visit_with_nurse,
    select_available_nurse,
)

__all__ = [
    "assign_available_nurse",
    "assign_nurse_to_visit_automatically",
    "busy_nurse_ids",
    "load_visit_with_nurse",
    "select_available_nurse",
]
