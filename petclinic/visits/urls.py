"""Visits App URLs.

Prefix: /api/
Routes:
    GET|POST              /api/visits/
    GET|PUT|PATCH|DELETE  /api/visits/<uuid>/
"""

from django.urls import path

from .views import VisitDetailView, VisitListCreateView

app_name = 'visits'

urlpatterns = [
    path('visits/', VisitListCreateView.as_view(), name='visit-list'),
    path('visits/<uuid:pk>/', VisitDetailView.as_view(), name='visit-detail'),
]
