"""Serializers for the core app."""

from rest_framework import serializers

from petclinic.core.models import User
from petclinic.core.staff import staff_display_name


class NurseSerializer(serializers.ModelSerializer):
    """Roster entry as shown in the visit form's nurse picker."""

    name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'username', 'name']
        read_only_fields = fields

    def get_name(self, obj):
        return staff_display_name(obj)
