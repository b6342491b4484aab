from __future__ import annotations

from datetime import date
from unittest.mock import patch

from django.db import DatabaseError
from django.test import SimpleTestCase, TestCase, override_settings

from petclinic.core.sequences import current_value
from petclinic.visits.exceptions import InvalidVisitData, VisitNumberingError
from petclinic.visits.models import Visit
from petclinic.visits.numbering import format_visit_number

from .mixins import VisitTestMixin


class VisitNumberFormatTests(SimpleTestCase):
    def test_counter_is_zero_padded(self):
        self.assertEqual(format_visit_number(2024, 1), "V-2024-000001")
        self.assertEqual(format_visit_number(2024, 123456), "V-2024-123456")

    def test_large_counter_is_not_truncated(self):
        self.assertEqual(format_visit_number(2024, 1234567), "V-2024-1234567")


@override_settings(VISIT_NURSE_ASSIGNMENT_ENABLED=False)
class VisitNumberingTests(VisitTestMixin, TestCase):
    def _create(self, day: date) -> Visit:
        return Visit.objects.create(
            pet=self.pet,
            visit_start=self.at(10, 0, day=day),
            visit_end=self.at(11, 0, day=day),
        )

    def test_visits_are_numbered_in_creation_order(self):
        numbers = [self._create(date(2024, 3, 1)).visit_number for _ in range(3)]

        self.assertEqual(numbers, ["V-2024-000001", "V-2024-000002", "V-2024-000003"])

    def test_year_comes_from_visit_start(self):
        # Created "now", scheduled for 2027.
        visit = self._create(date(2027, 1, 5))

        self.assertTrue(visit.visit_number.startswith("V-2027-"))

    def test_counter_is_shared_across_years(self):
        first = self._create(date(2024, 12, 30))
        second = self._create(date(2025, 1, 2))

        self.assertEqual(first.visit_number, "V-2024-000001")
        self.assertEqual(second.visit_number, "V-2025-000002")
        self.assertEqual(current_value("visit_number"), 2)

    def test_resave_keeps_number(self):
        visit = self._create(date(2024, 3, 1))
        number = visit.visit_number

        visit.visit_start = self.at(10, 0, day=date(2026, 3, 1))
        visit.visit_end = self.at(11, 0, day=date(2026, 3, 1))
        visit.save()
        visit.refresh_from_db()

        self.assertEqual(visit.visit_number, number)
        self.assertEqual(current_value("visit_number"), 1)

    def test_preset_number_is_replaced(self):
        visit = Visit.objects.create(
            visit_number="V-1999-999999",
            visit_start=self.at(10, 0, day=date(2024, 3, 1)),
            visit_end=self.at(11, 0, day=date(2024, 3, 1)),
        )

        self.assertEqual(visit.visit_number, "V-2024-000001")

    def test_numbers_are_unique(self):
        numbers = {self._create(date(2024, 3, 1)).visit_number for _ in range(5)}

        self.assertEqual(len(numbers), 5)

    @override_settings(VISIT_NUMBER_SEQUENCE="visit_number_test")
    def test_sequence_name_from_settings(self):
        self._create(date(2024, 3, 1))

        self.assertEqual(current_value("visit_number_test"), 1)
        self.assertEqual(current_value("visit_number"), 0)

    def test_counter_failure_aborts_creation(self):
        with patch(
            "petclinic.visits.numbering.next_value",
            side_effect=DatabaseError("sequence table locked"),
        ):
            with self.assertRaises(VisitNumberingError) as ctx:
                self._create(date(2024, 3, 1))

        self.assertEqual(ctx.exception.sequence_name, "visit_number")
        self.assertEqual(Visit.objects.count(), 0)

    def test_visit_without_start_is_rejected(self):
        with self.assertRaises(InvalidVisitData) as ctx:
            Visit.objects.create(pet=self.pet, visit_end=self.at(11, 0))

        self.assertEqual(ctx.exception.to_dict()["field"], "visit_start")
        self.assertEqual(current_value("visit_number"), 0)
