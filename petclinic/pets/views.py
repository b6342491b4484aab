from rest_framework import generics
from rest_framework.exceptions import ValidationError

from .models import Owner, Pet
from .permissions import PetPermission
from .serializers import OwnerSerializer, PetSerializer


def _parse_query_int(request, name):
	value = request.query_params.get(name)
	if value in (None, ''):
		return None
	try:
		return int(value)
	except ValueError:
		raise ValidationError({name: f'{name} must be an integer.'})


class OwnerListCreateView(generics.ListCreateAPIView):
	permission_classes = [PetPermission]
	serializer_class = OwnerSerializer
	queryset = Owner.objects.all()


class PetListCreateView(generics.ListCreateAPIView):
	"""
	List and create pets.

	GET filters:
	- ``identification_number``: case-insensitive substring match
	- ``type``: pet type id
	- ``owner``: owner id
	"""
	permission_classes = [PetPermission]
	serializer_class = PetSerializer

	def get_queryset(self):
		qs = Pet.objects.select_related('type', 'owner')

		identification_number = self.request.query_params.get('identification_number')
		if identification_number:
			qs = qs.filter(identification_number__icontains=identification_number)

		type_id = _parse_query_int(self.request, 'type')
		if type_id is not None:
			qs = qs.filter(type_id=type_id)

		owner_id = _parse_query_int(self.request, 'owner')
		if owner_id is not None:
			qs = qs.filter(owner_id=owner_id)

		return qs


class PetDetailView(generics.RetrieveUpdateAPIView):
	permission_classes = [PetPermission]
	serializer_class = PetSerializer
	queryset = Pet.objects.select_related('type', 'owner')
