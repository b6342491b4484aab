"""
Visits App Configuration
"""

from django.apps import AppConfig


class VisitsConfig(AppConfig):
    """App-Konfiguration für Besuche, Nummernvergabe & Pflege-Zuteilung"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'petclinic.visits'
    verbose_name = 'Visits (Besuche & Planung)'

    def ready(self):
        # Registers the numbering and post-commit assignment receivers.
        from . import signals  # noqa: F401
