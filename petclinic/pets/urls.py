"""Pets App URLs.

Prefix: /api/
Routes:
    GET|POST      /api/owners/
    GET|POST      /api/pets/
    GET|PUT|PATCH /api/pets/<id>/
"""

from django.urls import path

from .views import OwnerListCreateView, PetDetailView, PetListCreateView

app_name = 'pets'

urlpatterns = [
    path('owners/', OwnerListCreateView.as_view(), name='owner-list'),
    path('pets/', PetListCreateView.as_view(), name='pet-list'),
    path('pets/<int:pk>/', PetDetailView.as_view(), name='pet-detail'),
]
