"""
Core App Configuration
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Standard App-Konfiguration für Core"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'petclinic.core'
    verbose_name = 'Core (Personal, Rollen & Sequenzen)'
