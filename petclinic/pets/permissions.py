from petclinic.core.permissions import RBACPermission


class PetPermission(RBACPermission):
    """
    RBAC for pets and owners:
    - admin, receptionist, vet, nurse: read
    - admin, receptionist, vet: write
    """

    read_roles = {"admin", "receptionist", "vet", "nurse"}
    write_roles = {"admin", "receptionist", "vet"}
