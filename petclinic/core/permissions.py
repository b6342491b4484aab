"""Core permissions for RBAC (Role-Based Access Control).

This module provides the base permission class following the project's RBAC
pattern with read_roles/write_roles.

Standard roles: admin, receptionist, vet, nurse
"""

from rest_framework.permissions import BasePermission, SAFE_METHODS


class RBACPermission(BasePermission):
    """Base class for RBAC permissions with read_roles/write_roles pattern.

    Subclasses should define:
    - read_roles: set of role names that can perform GET/HEAD/OPTIONS
    - write_roles: set of role names that can perform POST/PUT/PATCH/DELETE

    Example:
        class MyPermission(RBACPermission):
            read_roles = {"admin", "receptionist", "vet", "nurse"}
            write_roles = {"admin", "receptionist"}
    """

    read_roles: set = set()
    write_roles: set = set()

    def _role_name(self, request):
        user = getattr(request, "user", None)
        role = getattr(user, "role", None)
        return getattr(role, "name", None)

    def has_permission(self, request, view):
        user = getattr(request, "user", None)
        if not user or not user.is_authenticated:
            return False

        role_name = self._role_name(request)
        if not role_name:
            return False

        if request.method in SAFE_METHODS:
            return role_name in self.read_roles

        return role_name in self.write_roles


class StaffRosterPermission(RBACPermission):
    """Everyone on staff may read the roster; nobody writes through the API."""

    read_roles = {"admin", "receptionist", "vet", "nurse"}
    write_roles: set = set()
