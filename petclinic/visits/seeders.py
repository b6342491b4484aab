from datetime import datetime, time, timedelta

from django.db import transaction
from django.utils import timezone

from petclinic.pets.models import Pet

from .models import Visit
from .scheduling import calculate_visit_end


def seed_visits(flush: bool = False) -> dict:
    """
    Seedet Besuche für morgen ohne Pflegekraft.

    Die Pflege-Zuteilung erfolgt automatisch nach dem Commit.
    """
    stats: dict[str, int] = {}

    with transaction.atomic():
        if flush:
            Visit.objects.all().delete()

        tomorrow = timezone.localdate() + timedelta(days=1)
        day_start = timezone.make_aware(datetime.combine(tomorrow, time(13, 0)))

        created = 0
        for offset_minutes, pet in zip((0, 15, 30), Pet.objects.order_by("id")):
            visit_start = day_start + timedelta(minutes=offset_minutes)
            Visit.objects.create(
                pet=pet,
                type=Visit.TYPE_REGULAR_CHECKUP,
                visit_start=visit_start,
                visit_end=calculate_visit_end(Visit.TYPE_REGULAR_CHECKUP, visit_start),
            )
            created += 1
        stats["visits_visits"] = created

    return stats
