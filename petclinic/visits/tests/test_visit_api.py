from __future__ import annotations

from datetime import timedelta
from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase

from rest_framework.test import APIClient

from petclinic.core.models import User
from petclinic.visits.models import Visit

from .mixins import VisitTestMixin


def _iso(value) -> str:
    return value.isoformat().replace("+00:00", "Z")


class VisitAPITest(VisitTestMixin, TestCase):
    """Tests for /api/visits/.

    RBAC: admin, receptionist, vet = read/write; nurse = read-only.
    """

    def setUp(self):
        super().setUp()
        self.vet = User.objects.create_user(
            username="vet_api_test",
            email="vet_api@test.local",
            password="DummyPass123!",
            role=self.role_vet,
        )

        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"
        self.client.force_authenticate(user=self.receptionist)

    def _post(self, **payload):
        data = {"pet": self.pet.id}
        data.update(payload)
        with self.captureOnCommitCallbacks(execute=True):
            return self.client.post("/api/visits/", data, format="json")

    def test_create_numbers_visit_and_assigns_nurse(self):
        r = self._post(
            visit_start=_iso(self.at(13, 0)),
            visit_end=_iso(self.at(14, 0)),
        )

        self.assertEqual(r.status_code, 201)
        self.assertRegex(r.data["visit_number"], r"^V-2031-\d{6}$")

        visit = Visit.objects.get(pk=r.data["id"])
        self.assertEqual(visit.assigned_nurse, self.joy)

    def test_create_with_nurse_keeps_nurse(self):
        r = self._post(
            visit_start=_iso(self.at(13, 0)),
            visit_end=_iso(self.at(14, 0)),
            assigned_nurse=self.comfey.id,
        )

        self.assertEqual(r.status_code, 201)
        self.assertEqual(r.data["assigned_nurse"], self.comfey.id)
        self.assertEqual(Visit.objects.get(pk=r.data["id"]).assigned_nurse, self.comfey)

    def test_create_defaults(self):
        r = self._post(visit_start=_iso(self.at(13, 0)))

        self.assertEqual(r.status_code, 201)
        self.assertEqual(r.data["type"], Visit.TYPE_REGULAR_CHECKUP)
        self.assertEqual(r.data["treatment_status"], Visit.STATUS_UPCOMING)

        visit = Visit.objects.get(pk=r.data["id"])
        self.assertEqual(visit.visit_end, self.at(13, 30))
        self.assertIn("Pikachu", visit.description)
        self.assertIn("Ash Ketchum", visit.description)

    def test_recharge_visit_lasts_three_hours(self):
        r = self._post(visit_start=_iso(self.at(9, 0)), type=Visit.TYPE_RECHARGE)

        self.assertEqual(r.status_code, 201)
        visit = Visit.objects.get(pk=r.data["id"])
        self.assertEqual(visit.visit_end - visit.visit_start, timedelta(hours=3))
        self.assertTrue(visit.description.startswith("Recharge Visit Notes"))

    def test_description_without_pet(self):
        r = self._post(pet=None, visit_start=_iso(self.at(9, 0)), type=Visit.TYPE_OTHER)

        self.assertEqual(r.status_code, 201)
        visit = Visit.objects.get(pk=r.data["id"])
        self.assertIn("the pet owner", visit.description)

    def test_end_before_start_is_rejected(self):
        r = self._post(
            visit_start=_iso(self.at(14, 0)),
            visit_end=_iso(self.at(13, 0)),
        )

        self.assertEqual(r.status_code, 400)
        self.assertIn("visit_end", r.data)
        self.assertFalse(Visit.objects.exists())

    def test_non_nurse_cannot_be_assigned(self):
        r = self._post(
            visit_start=_iso(self.at(13, 0)),
            assigned_nurse=self.vet.id,
        )

        self.assertEqual(r.status_code, 400)
        self.assertIn("assigned_nurse", r.data)

    def test_numbering_failure_returns_503(self):
        with patch(
            "petclinic.visits.numbering.next_value",
            side_effect=DatabaseError("sequence table locked"),
        ):
            r = self._post(visit_start=_iso(self.at(13, 0)))

        self.assertEqual(r.status_code, 503)
        self.assertEqual(r.data["sequence"], "visit_number")
        self.assertFalse(Visit.objects.exists())

    def test_nurse_can_read_but_not_write(self):
        self.create_visit(self.at(13, 0), self.at(14, 0))
        self.client.force_authenticate(user=self.joy)

        r = self.client.get("/api/visits/")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data["count"], 1)

        r = self.client.post(
            "/api/visits/",
            {"visit_start": _iso(self.at(15, 0))},
            format="json",
        )
        self.assertEqual(r.status_code, 403)

    def test_unauthenticated_is_rejected(self):
        self.client.force_authenticate(user=None)

        r = self.client.get("/api/visits/")

        self.assertEqual(r.status_code, 401)

    def test_list_filters(self):
        self.create_visit(self.at(13, 0), self.at(14, 0), nurse=self.joy)
        self.create_visit(self.at(13, 0), self.at(14, 0), nurse=self.comfey)
        unassigned = self.create_visit(self.at(13, 30), self.at(14, 30))
        self.create_visit(self.at(18, 0), self.at(19, 0))

        r = self.client.get("/api/visits/", {"unassigned": "true"})
        self.assertEqual([v["id"] for v in r.data["results"]], [str(unassigned.id)])

        r = self.client.get("/api/visits/", {"nurse": self.comfey.id})
        self.assertEqual(r.data["count"], 1)

        r = self.client.get(
            "/api/visits/",
            {"start": _iso(self.at(13, 45)), "end": _iso(self.at(17, 0))},
        )
        self.assertEqual(r.data["count"], 3)

    def test_update_does_not_change_number_or_nurse(self):
        visit = self.create_visit(self.at(13, 0), self.at(14, 0))

        with self.captureOnCommitCallbacks(execute=True):
            r = self.client.patch(
                f"/api/visits/{visit.id}/",
                {"treatment_status": Visit.STATUS_DONE},
                format="json",
            )

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data["visit_number"], visit.visit_number)
        self.assertEqual(r.data["assigned_nurse"], self.joy.id)
        self.assertEqual(r.data["treatment_status"], Visit.STATUS_DONE)

    def test_delete(self):
        visit = self.create_visit(self.at(13, 0), self.at(14, 0))

        with self.captureOnCommitCallbacks(execute=True):
            r = self.client.delete(f"/api/visits/{visit.id}/")

        self.assertEqual(r.status_code, 204)
        self.assertFalse(Visit.objects.filter(pk=visit.id).exists())

    def test_malformed_list_filters_are_rejected(self):
        cases = [
            ("nurse", "abc"),
            ("start", "2024-13-45T10:00:00"),
            ("end", "not-a-date"),
        ]
        for key, value in cases:
            with self.subTest(key=key, value=value):
                r = self.client.get("/api/visits/", {key: value})

                self.assertEqual(r.status_code, 400)
                self.assertIn(key, r.data)

    def test_moving_start_moves_end(self):
        visit = self.create_visit(self.at(13, 0), self.at(13, 30))

        r = self.client.patch(
            f"/api/visits/{visit.id}/",
            {"visit_start": _iso(self.at(16, 0))},
            format="json",
        )

        self.assertEqual(r.status_code, 200)
        visit.refresh_from_db()
        self.assertEqual(visit.visit_start, self.at(16, 0))
        self.assertEqual(visit.visit_end, self.at(16, 30))

    def test_explicit_end_is_kept_when_start_moves(self):
        visit = self.create_visit(self.at(13, 0), self.at(13, 30))

        r = self.client.patch(
            f"/api/visits/{visit.id}/",
            {"visit_start": _iso(self.at(12, 0)), "visit_end": _iso(self.at(13, 30))},
            format="json",
        )

        self.assertEqual(r.status_code, 200)
        visit.refresh_from_db()
        self.assertEqual(visit.visit_end, self.at(13, 30))

    def test_status_change_keeps_times(self):
        visit = self.create_visit(self.at(13, 0), self.at(14, 0))

        r = self.client.patch(
            f"/api/visits/{visit.id}/",
            {"treatment_status": Visit.STATUS_IN_PROGRESS},
            format="json",
        )

        self.assertEqual(r.status_code, 200)
        visit.refresh_from_db()
        self.assertEqual(visit.visit_end, self.at(14, 0))
