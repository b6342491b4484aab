from __future__ import annotations

from datetime import datetime, timedelta

from .models import Visit


# Default visit length per visit type, in minutes.
VISIT_DURATION_MINUTES = {
	Visit.TYPE_REGULAR_CHECKUP: 30,
	Visit.TYPE_RECHARGE: 180,
	Visit.TYPE_STATUS_CONDITION_HEALING: 60,
	Visit.TYPE_DISEASE_TREATMENT: 60,
	Visit.TYPE_OTHER: 60,
}


def calculate_visit_end(visit_type: str | None, visit_start: datetime) -> datetime:
	minutes = VISIT_DURATION_MINUTES.get(visit_type or Visit.TYPE_REGULAR_CHECKUP, 60)
	return visit_start + timedelta(minutes=minutes)


def find_overlapping_visits(
	start: datetime,
	end: datetime,
	*,
	buffer: timedelta | None = None,
):
	"""Return all visits whose interval overlaps ``[start, end)``.

	Half-open overlap: ``visit_start < end`` and ``visit_end > start``. Back-to-back
	visits (one ends when the other starts) do not overlap.

	Nothing is excluded, the visit being scheduled included. ``buffer`` widens
	the window on both sides so that visits closer than ``buffer`` count as
	overlapping, too.
	"""
	if buffer:
		start = start - buffer
		end = end + buffer
	return (
		Visit.objects
		.filter(visit_start__lt=end, visit_end__gt=start)
		.select_related("assigned_nurse")
		.order_by("visit_start", "visit_number")
	)
