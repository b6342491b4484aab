"""Celery tasks for the visits app."""

from celery import shared_task

from petclinic.visits.services.nurse_assignment import assign_nurse_to_visit_automatically


@shared_task(name='visits.assign_nurse_to_visit', ignore_result=True)
def assign_nurse_to_visit(visit_id: str):
    """Out-of-process variant of the post-commit nurse assignment."""
    assign_nurse_to_visit_automatically(visit_id)
