from rest_framework import serializers

from .models import Owner, Pet, PetType


class OwnerSerializer(serializers.ModelSerializer):
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = Owner
        fields = [
            'id',
            'first_name',
            'last_name',
            'full_name',
            'address',
            'city',
            'email',
            'telephone',
        ]


class PetSerializer(serializers.ModelSerializer):
    type = serializers.PrimaryKeyRelatedField(
        queryset=PetType.objects.all(),
        required=False,
        allow_null=True,
    )
    owner = serializers.PrimaryKeyRelatedField(
        queryset=Owner.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Pet
        fields = [
            'id',
            'name',
            'identification_number',
            'health_status',
            'birthdate',
            'type',
            'owner',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['created_at', 'updated_at']
