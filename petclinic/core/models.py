from django.contrib.auth.models import AbstractUser
from django.db import models


class Role(models.Model):
    """User roles for RBAC (Role-Based Access Control).

    Standard roles: admin, receptionist, vet, nurse
    """

    ADMIN = 'admin'
    RECEPTIONIST = 'receptionist'
    VET = 'vet'
    NURSE = 'nurse'

    name = models.CharField(max_length=64, unique=True, db_index=True)
    label = models.CharField(max_length=128)

    class Meta:
        db_table = 'core_role'
        ordering = ['name']
        verbose_name = 'Role'
        verbose_name_plural = 'Roles'

    def __str__(self) -> str:
        return self.label


class User(AbstractUser):
    """Clinic staff member with role-based access control.

    Extends Django's AbstractUser with:
    - role: ForeignKey to Role for RBAC (nurses are users with the ``nurse`` role)
    - email: Made unique (required for JWT auth)
    """

    email = models.EmailField('email address', blank=True, unique=True)
    role = models.ForeignKey(
        Role,
        null=True,
        blank=True,
        on_delete=models.PROTECT,
        related_name='users',
    )

    class Meta:
        db_table = 'core_user'
        ordering = ['username']
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self) -> str:
        return self.get_full_name() or self.username


class Sequence(models.Model):
    """Persistent, process-wide monotonic counter.

    One row per counter name. Values are handed out by
    ``petclinic.core.sequences.next_value`` under a row lock, so several
    processes sharing the database never receive the same value.
    """

    name = models.CharField(max_length=100, unique=True)
    value = models.BigIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'core_sequence'
        ordering = ['name']
        verbose_name = 'Sequence'
        verbose_name_plural = 'Sequences'

    def __str__(self) -> str:
        return f"{self.name}={self.value}"
