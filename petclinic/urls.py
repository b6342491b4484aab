"""PetClinic URL Configuration.

API-Routen:
    /api/health/  - Health check (core)
    /api/auth/    - JWT authentication (core)
    /api/nurses/  - Nurse roster (core)
    /api/owners/, /api/pets/ - Halter & Tiere (pets)
    /api/visits/  - Besuche (visits)
"""

from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path


def root(request):
    """Plain-text root endpoint, doubles as a trivial liveness check."""
    return HttpResponse("PetClinic backend is running.")


urlpatterns = [
    path("", root, name="root"),
    path("admin/", admin.site.urls),

    path("api/", include("petclinic.core.urls")),
    path("api/", include("petclinic.pets.urls")),
    path("api/", include("petclinic.visits.urls")),
]
