"""
Pets App Configuration
"""

from django.apps import AppConfig


class PetsConfig(AppConfig):
    """Standard App-Konfiguration für Tiere & Halter"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'petclinic.pets'
    verbose_name = 'Pets (Tiere & Halter)'
