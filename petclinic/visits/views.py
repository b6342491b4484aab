from django.db import transaction
from django.utils.dateparse import parse_datetime

from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from .exceptions import InvalidVisitData, VisitError, VisitNumberingError
from .models import Visit
from .permissions import VisitPermission
from .serializers import VisitCreateUpdateSerializer, VisitSerializer


def _parse_query_dt(request, name):
	value = request.query_params.get(name)
	if not value:
		return None
	try:
		parsed = parse_datetime(value)
	except ValueError:
		parsed = None
	if parsed is None:
		raise ValidationError({name: 'Invalid ISO datetime.'})
	return parsed


def _parse_query_int(request, name):
	value = request.query_params.get(name)
	if value in (None, ''):
		return None
	try:
		return int(value)
	except ValueError:
		raise ValidationError({name: f'{name} must be an integer.'})


def _visit_queryset():
	return Visit.objects.select_related('pet', 'pet__owner', 'assigned_nurse')


class VisitListCreateView(generics.ListCreateAPIView):
	"""
	List and create visits.

	GET filters:
	- ``start`` / ``end``: only visits overlapping ``[start, end)``
	- ``nurse``: only visits assigned to this nurse id
	- ``unassigned=true``: only visits without a nurse

	POST numbers the visit and, once the creation is committed, assigns a
	free nurse if none was given.
	"""
	permission_classes = [VisitPermission]

	def get_queryset(self):
		qs = _visit_queryset()

		start = _parse_query_dt(self.request, 'start')
		end = _parse_query_dt(self.request, 'end')
		if start is not None:
			qs = qs.filter(visit_end__gt=start)
		if end is not None:
			qs = qs.filter(visit_start__lt=end)

		nurse_id = _parse_query_int(self.request, 'nurse')
		if nurse_id is not None:
			qs = qs.filter(assigned_nurse_id=nurse_id)
		if self.request.query_params.get('unassigned') == 'true':
			qs = qs.filter(assigned_nurse__isnull=True)

		return qs

	def get_serializer_class(self):
		if self.request.method == 'POST':
			return VisitCreateUpdateSerializer
		return VisitSerializer

	def create(self, request, *args, **kwargs):
		write_serializer = self.get_serializer(data=request.data)
		write_serializer.is_valid(raise_exception=True)

		try:
			# The automatic nurse assignment runs when this block commits.
			with transaction.atomic():
				visit = write_serializer.save()
		except VisitNumberingError as e:
			return Response(e.to_dict(), status=status.HTTP_503_SERVICE_UNAVAILABLE)
		except InvalidVisitData as e:
			return Response(e.to_dict(), status=status.HTTP_400_BAD_REQUEST)
		except VisitError as e:
			return Response({'detail': str(e)}, status=status.HTTP_400_BAD_REQUEST)

		visit = _visit_queryset().get(pk=visit.pk)
		read_serializer = VisitSerializer(visit, context={'request': request})
		headers = self.get_success_headers(read_serializer.data)
		return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class VisitDetailView(generics.RetrieveUpdateDestroyAPIView):
	permission_classes = [VisitPermission]

	def get_queryset(self):
		return _visit_queryset()

	def get_serializer_class(self):
		if self.request.method in ('PUT', 'PATCH'):
			return VisitCreateUpdateSerializer
		return VisitSerializer

	def update(self, request, *args, **kwargs):
		partial = kwargs.pop('partial', False)
		visit = self.get_object()

		write_serializer = VisitCreateUpdateSerializer(
			visit,
			data=request.data,
			partial=partial,
			context={'request': request},
		)
		write_serializer.is_valid(raise_exception=True)
		updated = write_serializer.save()

		read_serializer = VisitSerializer(updated, context={'request': request})
		return Response(read_serializer.data, status=status.HTTP_200_OK)
