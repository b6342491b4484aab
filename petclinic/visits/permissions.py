from petclinic.core.permissions import RBACPermission


class VisitPermission(RBACPermission):
    """
    RBAC for visits:
    - admin, receptionist, vet, nurse: read
    - admin, receptionist, vet: write

    Nurses see their visits but do not book them.
    """

    read_roles = {"admin", "receptionist", "vet", "nurse"}
    write_roles = {"admin", "receptionist", "vet"}
