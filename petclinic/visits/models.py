"""Visit domain model.

A visit is a scheduled clinic appointment for a pet, occupying the
half-open interval ``[visit_start, visit_end)``.

- ``visit_number`` is assigned once, on first save (see ``visits.numbering``).
- ``assigned_nurse`` may be chosen by staff; if left empty, a nurse without
  overlapping visits is assigned after the creating transaction commits
  (see ``visits.services.nurse_assignment``).
"""

import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models


class Visit(models.Model):
	TYPE_REGULAR_CHECKUP = "REGULAR_CHECKUP"
	TYPE_RECHARGE = "RECHARGE"
	TYPE_STATUS_CONDITION_HEALING = "STATUS_CONDITION_HEALING"
	TYPE_DISEASE_TREATMENT = "DISEASE_TREATMENT"
	TYPE_OTHER = "OTHER"

	TYPE_CHOICES = (
		(TYPE_REGULAR_CHECKUP, TYPE_REGULAR_CHECKUP),
		(TYPE_RECHARGE, TYPE_RECHARGE),
		(TYPE_STATUS_CONDITION_HEALING, TYPE_STATUS_CONDITION_HEALING),
		(TYPE_DISEASE_TREATMENT, TYPE_DISEASE_TREATMENT),
		(TYPE_OTHER, TYPE_OTHER),
	)

	STATUS_UPCOMING = "UPCOMING"
	STATUS_IN_PROGRESS = "IN_PROGRESS"
	STATUS_DONE = "DONE"

	STATUS_CHOICES = (
		(STATUS_UPCOMING, STATUS_UPCOMING),
		(STATUS_IN_PROGRESS, STATUS_IN_PROGRESS),
		(STATUS_DONE, STATUS_DONE),
	)

	id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
	visit_number = models.CharField(max_length=32, unique=True, editable=False)
	pet = models.ForeignKey(
		"pets.Pet",
		null=True,
		blank=True,
		on_delete=models.SET_NULL,
		related_name="visits",
	)
	type = models.CharField(max_length=32, choices=TYPE_CHOICES, default=TYPE_REGULAR_CHECKUP)
	description = models.TextField(blank=True, default="")
	treatment_status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_UPCOMING)
	assigned_nurse = models.ForeignKey(
		settings.AUTH_USER_MODEL,
		null=True,
		blank=True,
		on_delete=models.SET_NULL,
		related_name="assigned_visits",
	)
	visit_start = models.DateTimeField()
	visit_end = models.DateTimeField()
	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:
		ordering = ["-visit_start", "visit_number"]
		indexes = [
			models.Index(fields=["visit_start", "visit_end"], name="visit_interval_idx"),
		]

	def clean(self):
		super().clean()
		if self.visit_start and self.visit_end and self.visit_start >= self.visit_end:
			raise ValidationError({"visit_end": "visit_end must be after visit_start."})

	def __str__(self) -> str:
		return self.visit_number or f"Visit {self.id}"
