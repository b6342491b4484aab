"""Visit lifecycle hooks.

- ``pre_save``: number new visits inside the creating transaction.
- ``post_save`` / ``post_delete``: queue a ``VisitChangedEvent`` that is sent
  through ``visit_changed`` only once the surrounding transaction commits.
  If the transaction rolls back, nothing is sent.
- ``visit_changed`` receiver: start the automatic nurse assignment for
  created visits.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.db import transaction
from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import Signal, receiver

from .events import ChangeType, VisitChangedEvent
from .models import Visit
from .numbering import assign_visit_number
from .services.nurse_assignment import assign_nurse_to_visit_automatically
from .tasks import assign_nurse_to_visit

logger = logging.getLogger(__name__)

# Sent with ``event=VisitChangedEvent`` after the change has been committed.
visit_changed = Signal()


def _send_visit_changed(event: VisitChangedEvent) -> None:
    responses = visit_changed.send_robust(sender=Visit, event=event)
    for handler, result in responses:
        if isinstance(result, Exception):
            logger.error(
                'visit_changed receiver %r failed for visit %s (%s): %s',
                handler,
                event.entity_id,
                event.change_type.value,
                result,
            )


def publish_after_commit(event: VisitChangedEvent) -> None:
    transaction.on_commit(lambda: _send_visit_changed(event))


@receiver(pre_save, sender=Visit, dispatch_uid='visits.assign_visit_number')
def number_new_visit(sender, instance, raw=False, **kwargs):
    if raw:
        return
    assign_visit_number(instance)


@receiver(post_save, sender=Visit, dispatch_uid='visits.publish_saved')
def publish_visit_saved(sender, instance, created, raw=False, **kwargs):
    if raw:
        return
    change_type = ChangeType.CREATED if created else ChangeType.UPDATED
    publish_after_commit(VisitChangedEvent(entity_id=instance.pk, change_type=change_type))


@receiver(post_delete, sender=Visit, dispatch_uid='visits.publish_deleted')
def publish_visit_deleted(sender, instance, **kwargs):
    publish_after_commit(VisitChangedEvent(entity_id=instance.pk, change_type=ChangeType.DELETED))


@receiver(visit_changed, sender=Visit, dispatch_uid='visits.assign_nurse_on_create')
def assign_nurse_on_visit_created(sender, event: VisitChangedEvent, **kwargs):
    if event.change_type is not ChangeType.CREATED:
        return
    if not settings.VISIT_NURSE_ASSIGNMENT_ENABLED:
        logger.debug('Automatic nurse assignment disabled, visit %s left as is', event.entity_id)
        return

    if settings.VISIT_NURSE_ASSIGNMENT_ASYNC:
        assign_nurse_to_visit.delay(str(event.entity_id))
        return

    assign_nurse_to_visit_automatically(event.entity_id)
