from django.contrib.auth import get_user_model
from django.db import transaction

from .models import Role

User = get_user_model()

SEED_EMAIL_DOMAIN = "@seed.local"

# Roster order follows creation order: joy is the first candidate, comfey the second.
NURSES = [
    ("joy", "Nurse", "Joy"),
    ("comfey", "Comfey", "Nurse"),
]


def seed_core(flush: bool = False) -> dict:
    """
    Seedet:
    - Rollen
    - Personal (Admin, Empfang, Tierarzt, Pflege)

    Wenn flush=True:
        - Löscht NICHT Superuser
        - Löscht nur Benutzer, deren E-Mail auf '@seed.local' endet
    """
    stats: dict[str, int] = {}

    with transaction.atomic():
        if flush:
            User.objects.filter(is_superuser=False, email__endswith=SEED_EMAIL_DOMAIN).delete()

        roles = _seed_roles()
        stats["core_roles"] = len(roles)

        users = _seed_users(roles)
        stats["core_users"] = len(users)

    return stats


def _seed_roles() -> list[Role]:
    role_definitions = [
        (Role.ADMIN, "Admin"),
        (Role.RECEPTIONIST, "Empfang"),
        (Role.VET, "Tierarzt"),
        (Role.NURSE, "Pflege"),
    ]

    roles: list[Role] = []
    for name, label in role_definitions:
        role, _created = Role.objects.get_or_create(name=name, defaults={"label": label})
        roles.append(role)
    return roles


def _seed_users(roles: list[Role]) -> list[User]:
    users: list[User] = []

    def get_role(name: str) -> Role | None:
        return next((r for r in roles if r.name == name), None)

    staff = [
        ("reception", "Rita", "Reception", Role.RECEPTIONIST),
        ("vet_oak", "Samuel", "Oak", Role.VET),
    ]
    staff += [(username, first, last, Role.NURSE) for username, first, last in NURSES]

    for username, first_name, last_name, role_name in staff:
        user, created = User.objects.get_or_create(
            username=username,
            defaults={
                "first_name": first_name,
                "last_name": last_name,
                "email": f"{username}{SEED_EMAIL_DOMAIN}",
                "role": get_role(role_name),
            },
        )
        if created:
            user.set_password(username)
            user.save(update_fields=["password"])
        users.append(user)

    return users
