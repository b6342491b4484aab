"""
PetClinic Seed Command – erzeugt reproduzierbare Testdaten.

Verwendung:
    python manage.py seed           # Seed für alle Apps
    python manage.py seed --flush   # Testdaten löschen und neu aufbauen
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from petclinic.core.seeders import seed_core
from petclinic.pets.seeders import seed_pets
from petclinic.visits.seeders import seed_visits


class Command(BaseCommand):
    help = "Seed database with test data for the PetClinic backend"

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete existing seed data before seeding (Superuser bleiben unangetastet).",
        )

    def handle(self, *args, **options):
        flush = options.get("flush", False)

        self.stdout.write("=" * 80)
        self.stdout.write("  PetClinic Seed – Testdaten generieren")
        self.stdout.write("=" * 80)

        stats = {}
        # Visits are committed together; nurses get assigned after this block.
        with transaction.atomic():
            self.stdout.write("\n[1/3] Seeding Core (Roles, Staff)...")
            core_stats = seed_core(flush=flush)
            stats.update(core_stats)
            self._print_stats(core_stats)

            self.stdout.write("\n[2/3] Seeding Pets (Types, Owners, Pets)...")
            pets_stats = seed_pets(flush=flush)
            stats.update(pets_stats)
            self._print_stats(pets_stats)

            self.stdout.write("\n[3/3] Seeding Visits...")
            visits_stats = seed_visits(flush=flush)
            stats.update(visits_stats)
            self._print_stats(visits_stats)

        self.stdout.write("\n" + "=" * 80)
        self.stdout.write("  Seeding erfolgreich abgeschlossen!")
        self.stdout.write("=" * 80)
        self._print_summary(stats)

    def _print_stats(self, stats):
        for key, value in stats.items():
            self.stdout.write(f"  - {key}: {value}")

    def _print_summary(self, stats):
        self.stdout.write("\nErstellte Datensätze (gesamt):")
        for key, value in sorted(stats.items()):
            self.stdout.write(f"  - {key}: {value}")
