from rest_framework import serializers

from petclinic.core.models import Role, User
from petclinic.core.staff import staff_display_name
from petclinic.pets.models import Pet

from .descriptions import default_description
from .models import Visit
from .scheduling import calculate_visit_end


class VisitSerializer(serializers.ModelSerializer):
    pet_name = serializers.SerializerMethodField()
    assigned_nurse_name = serializers.SerializerMethodField()

    class Meta:
        model = Visit
        fields = [
            'id',
            'visit_number',
            'pet',
            'pet_name',
            'type',
            'description',
            'treatment_status',
            'assigned_nurse',
            'assigned_nurse_name',
            'visit_start',
            'visit_end',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_pet_name(self, obj):
        pet = getattr(obj, 'pet', None)
        return pet.name if pet is not None else None

    def get_assigned_nurse_name(self, obj):
        nurse = getattr(obj, 'assigned_nurse', None)
        return staff_display_name(nurse) if nurse is not None else None


class VisitCreateUpdateSerializer(serializers.ModelSerializer):
    pet = serializers.PrimaryKeyRelatedField(
        queryset=Pet.objects.select_related('owner'),
        required=False,
        allow_null=True,
    )
    assigned_nurse = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.select_related('role'),
        required=False,
        allow_null=True,
    )
    visit_end = serializers.DateTimeField(required=False)
    description = serializers.CharField(required=False, allow_blank=True)

    class Meta:
        model = Visit
        fields = [
            'pet',
            'type',
            'description',
            'treatment_status',
            'assigned_nurse',
            'visit_start',
            'visit_end',
        ]

    def validate_assigned_nurse(self, value):
        if value is None:
            return value
        if getattr(value.role, 'name', None) != Role.NURSE:
            raise serializers.ValidationError('assigned_nurse must have the role "nurse".')
        if not value.is_active:
            raise serializers.ValidationError('assigned_nurse is not active.')
        return value

    def validate(self, attrs):
        instance = getattr(self, 'instance', None)

        visit_type = attrs.get('type', getattr(instance, 'type', None)) or Visit.TYPE_REGULAR_CHECKUP
        visit_start = attrs.get('visit_start', getattr(instance, 'visit_start', None))
        visit_end = attrs.get('visit_end', getattr(instance, 'visit_end', None))

        # A new start without an explicit end moves the end along with it.
        start_changed = instance is None or 'visit_start' in attrs
        if visit_start is not None and 'visit_end' not in attrs and (start_changed or visit_end is None):
            visit_end = calculate_visit_end(visit_type, visit_start)
            attrs['visit_end'] = visit_end

        if visit_start is not None and visit_end is not None and visit_start >= visit_end:
            raise serializers.ValidationError({'visit_end': 'visit_end must be after visit_start.'})

        description = attrs.get('description', getattr(instance, 'description', ''))
        if not (description or '').strip():
            pet = attrs.get('pet', getattr(instance, 'pet', None))
            attrs['description'] = default_description(visit_type, pet)

        return attrs
