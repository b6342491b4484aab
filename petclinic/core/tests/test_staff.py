from __future__ import annotations

from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from rest_framework.test import APIClient

from petclinic.core.models import Role, User
from petclinic.core.staff import find_all_nurses
from petclinic.visits.models import Visit


class NurseRosterTests(TestCase):
    databases = {"default"}

    def setUp(self):
        self.role_nurse, _ = Role.objects.get_or_create(
            name="nurse",
            defaults={"label": "Pflege"},
        )
        self.role_vet, _ = Role.objects.get_or_create(
            name="vet",
            defaults={"label": "Tierarzt"},
        )

        self.joy = User.objects.create_user(
            username="joy",
            email="joy@example.com",
            password="DummyPass123!",
            role=self.role_nurse,
        )
        self.vet = User.objects.create_user(
            username="vet",
            email="vet@example.com",
            password="DummyPass123!",
            role=self.role_vet,
        )
        self.comfey = User.objects.create_user(
            username="comfey",
            email="comfey@example.com",
            password="DummyPass123!",
            role=self.role_nurse,
        )
        self.retired = User.objects.create_user(
            username="retired",
            email="retired@example.com",
            password="DummyPass123!",
            role=self.role_nurse,
            is_active=False,
        )
        self.no_role = User.objects.create_user(
            username="no_role",
            email="no_role@example.com",
            password="DummyPass123!",
        )

        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"

    def test_roster_contains_active_nurses_in_id_order(self):
        self.assertEqual(find_all_nurses(), [self.joy, self.comfey])

    def test_roster_is_stable(self):
        self.assertEqual(find_all_nurses(), find_all_nurses())

    def test_nurse_list_api(self):
        self.client.force_authenticate(user=self.vet)

        r = self.client.get("/api/nurses/")

        self.assertEqual(r.status_code, 200)
        self.assertEqual([n["username"] for n in r.data], ["joy", "comfey"])
        self.assertEqual(set(r.data[0]), {"id", "username", "name"})

    def test_nurse_list_is_read_only(self):
        self.client.force_authenticate(user=self.vet)

        r = self.client.post("/api/nurses/", {}, format="json")

        self.assertEqual(r.status_code, 403)

    def test_user_without_role_is_forbidden(self):
        self.client.force_authenticate(user=self.no_role)

        r = self.client.get("/api/nurses/")

        self.assertEqual(r.status_code, 403)

    def test_login_returns_tokens(self):
        r = self.client.post(
            "/api/auth/login/",
            {"username": "joy", "password": "DummyPass123!"},
            format="json",
        )

        self.assertEqual(r.status_code, 200)
        self.assertIn("access", r.data)
        self.assertIn("refresh", r.data)

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {r.data['access']}")
        self.assertEqual(self.client.get("/api/nurses/").status_code, 200)


class HealthTests(TestCase):
    databases = {"default"}

    def test_health_without_auth(self):
        r = APIClient().get("/api/health/", HTTP_HOST="localhost")

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"status": "ok"})


class SeedCommandTests(TestCase):
    databases = {"default"}

    def test_seed_creates_staff_and_assigns_nurses(self):
        with self.captureOnCommitCallbacks(execute=True):
            call_command("seed", stdout=StringIO())

        nurses = [n.username for n in find_all_nurses()]
        self.assertEqual(nurses, ["joy", "comfey"])

        visits = list(Visit.objects.select_related("assigned_nurse").order_by("visit_start"))
        self.assertEqual(len(visits), 3)
        self.assertEqual(
            [v.assigned_nurse.username for v in visits],
            ["joy", "comfey", "joy"],
        )

    def test_seed_is_repeatable(self):
        call_command("seed", stdout=StringIO())
        call_command("seed", stdout=StringIO())

        self.assertEqual(User.objects.filter(role__name=Role.NURSE).count(), 2)
