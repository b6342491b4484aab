"""Core app views.

Contains:
- health: Health check endpoint
- NurseListView: the nurse roster in roster order
"""

from django.db import connection
from django.db.utils import DatabaseError
from django.http import JsonResponse

from rest_framework import generics

from petclinic.core.permissions import StaffRosterPermission
from petclinic.core.serializers import NurseSerializer
from petclinic.core.staff import find_all_nurses


def health(request):
    """Health check endpoint - no authentication required."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1;')
    except DatabaseError as exc:
        return JsonResponse({'status': 'error', 'detail': str(exc)}, status=503)

    return JsonResponse({'status': 'ok'})


class NurseListView(generics.ListAPIView):
    """GET /api/nurses/ - all active nurses, first candidate first."""

    permission_classes = [StaffRosterPermission]
    serializer_class = NurseSerializer
    pagination_class = None

    def get_queryset(self):
        return find_all_nurses()
