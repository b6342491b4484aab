from django.db import transaction

from .models import Owner, Pet, PetType


def seed_pets(flush: bool = False) -> dict:
    """
    Seedet:
    - Tierarten
    - Halter
    - Tiere (Gesundheitsstatus startet mit UNKNOWN)
    """
    stats: dict[str, int] = {}

    with transaction.atomic():
        if flush:
            Pet.objects.all().delete()
            Owner.objects.all().delete()

        types = {}
        for name in ("Electric", "Fire", "Water", "Grass"):
            pet_type, _created = PetType.objects.get_or_create(name=name)
            types[name] = pet_type
        stats["pets_types"] = len(types)

        owners = [
            Owner.objects.get_or_create(
                first_name=first_name,
                last_name=last_name,
                defaults={"city": city},
            )[0]
            for first_name, last_name, city in (
                ("Ash", "Ketchum", "Pallet Town"),
                ("Misty", "Waterflower", "Cerulean City"),
            )
        ]
        stats["pets_owners"] = len(owners)

        pets = [
            ("Pikachu", "025", "Electric", owners[0]),
            ("Charmander", "004", "Fire", owners[0]),
            ("Psyduck", "054", "Water", owners[1]),
        ]
        for name, identification_number, type_name, owner in pets:
            Pet.objects.get_or_create(
                identification_number=identification_number,
                defaults={"name": name, "type": types[type_name], "owner": owner},
            )
        stats["pets_pets"] = len(pets)

    return stats
