from __future__ import annotations

from datetime import date, datetime, time

from django.utils import timezone

from petclinic.core.models import Role, User
from petclinic.pets.models import Owner, Pet
from petclinic.visits.models import Visit


class VisitTestMixin:
    """Mixin providing staff, a pet and visit factories.

    Roster: joy is created before comfey, so joy is the first candidate.
    """

    databases = {"default"}

    def setUp(self):
        super().setUp()
        self.role_nurse, _ = Role.objects.get_or_create(
            name="nurse", defaults={"label": "Pflege"}
        )
        self.role_receptionist, _ = Role.objects.get_or_create(
            name="receptionist", defaults={"label": "Empfang"}
        )
        self.role_vet, _ = Role.objects.get_or_create(
            name="vet", defaults={"label": "Tierarzt"}
        )

        self.joy = User.objects.create_user(
            username="joy",
            password="nurse123",
            email="joy@test.local",
            first_name="Nurse",
            last_name="Joy",
            role=self.role_nurse,
        )
        self.comfey = User.objects.create_user(
            username="comfey",
            password="nurse123",
            email="comfey@test.local",
            role=self.role_nurse,
        )
        self.receptionist = User.objects.create_user(
            username="reception",
            password="desk123",
            email="reception@test.local",
            role=self.role_receptionist,
        )

        self.owner = Owner.objects.create(first_name="Ash", last_name="Ketchum")
        self.pet = Pet.objects.create(
            name="Pikachu",
            identification_number="025",
            owner=self.owner,
        )

        self.visit_day = date(2031, 5, 14)

    def at(self, hour: int, minute: int = 0, day: date | None = None) -> datetime:
        return timezone.make_aware(datetime.combine(day or self.visit_day, time(hour, minute)))

    def create_visit(self, start: datetime, end: datetime, nurse: User | None = None, **extra) -> Visit:
        """Create and commit a visit, running the post-commit hooks."""
        with self.captureOnCommitCallbacks(execute=True):
            visit = Visit.objects.create(
                pet=self.pet,
                type=extra.pop("type", Visit.TYPE_REGULAR_CHECKUP),
                treatment_status=Visit.STATUS_UPCOMING,
                visit_start=start,
                visit_end=end,
                assigned_nurse=nurse,
                **extra,
            )
        visit.refresh_from_db()
        return visit
