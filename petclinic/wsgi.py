"""WSGI entry point for the PetClinic backend."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'petclinic.settings')

application = get_wsgi_application()
