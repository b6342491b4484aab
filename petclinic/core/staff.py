"""Staff lookups used by scheduling.

The nurse roster is read through on every call; there is no cache.
"""

from __future__ import annotations

from .models import Role, User


def find_all_nurses() -> list[User]:
    """Return all active nurses in roster order.

    Roster order is the primary key order, which is stable for a deployment
    and decides between otherwise equal candidates.
    """
    qs = User.objects.filter(is_active=True, role__name=Role.NURSE)
    return list(qs.select_related('role').order_by('id'))


def staff_display_name(user: User) -> str:
    return user.get_full_name() or getattr(user, 'username', str(user.id))
