"""Owners, pet types and pets.

Visits reference pets; the nurse assignment itself never looks at them.
"""

from django.db import models


class Owner(models.Model):
	"""Pet owner (client of the clinic)."""
	first_name = models.CharField(max_length=100)
	last_name = models.CharField(max_length=100)
	address = models.CharField(max_length=255, blank=True)
	city = models.CharField(max_length=100, blank=True)
	email = models.EmailField(blank=True)
	telephone = models.CharField(max_length=30, blank=True)
	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:
		ordering = ["last_name", "first_name", "id"]

	@property
	def full_name(self) -> str:
		return f"{self.first_name} {self.last_name}".strip()

	def __str__(self) -> str:
		return self.full_name


class PetType(models.Model):
	name = models.CharField(max_length=100, unique=True)

	class Meta:
		ordering = ["name", "id"]

	def __str__(self) -> str:
		return self.name


class Pet(models.Model):
	"""A patient of the clinic.

	New pets start with health status ``UNKNOWN`` until a vet has seen them.
	"""
	HEALTH_HEALTHY = "HEALTHY"
	HEALTH_SICK = "SICK"
	HEALTH_IN_RECOVERY = "IN_RECOVERY"
	HEALTH_UNKNOWN = "UNKNOWN"

	HEALTH_STATUS_CHOICES = (
		(HEALTH_HEALTHY, HEALTH_HEALTHY),
		(HEALTH_SICK, HEALTH_SICK),
		(HEALTH_IN_RECOVERY, HEALTH_IN_RECOVERY),
		(HEALTH_UNKNOWN, HEALTH_UNKNOWN),
	)

	name = models.CharField(max_length=100)
	identification_number = models.CharField(max_length=50)
	health_status = models.CharField(
		max_length=20,
		choices=HEALTH_STATUS_CHOICES,
		default=HEALTH_UNKNOWN,
	)
	birthdate = models.DateField(blank=True, null=True)
	type = models.ForeignKey(
		PetType,
		null=True,
		blank=True,
		on_delete=models.SET_NULL,
		related_name="pets",
	)
	owner = models.ForeignKey(
		Owner,
		null=True,
		blank=True,
		on_delete=models.SET_NULL,
		related_name="pets",
	)
	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:
		ordering = ["name", "id"]

	def __str__(self) -> str:
		return f"{self.name} ({self.identification_number})"
