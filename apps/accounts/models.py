from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.core.exceptions import ValidationError
from django.db import models
import uuid

from apps.registrations.models import YouthGroup


class StaffRole(models.TextChoices):
    ADMIN = 'admin', 'Admin'
    GROUP_LEADER = 'group_leader', 'Group leader'


class UserManager(BaseUserManager):
    """Custom user manager for email-based authentication."""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Email is required')

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.full_clean(exclude=['password'])
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', StaffRole.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """Staff account: bureau admin or leader of one youth group."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=255, db_index=True)
    display_name = models.CharField(max_length=100, blank=True)

    role = models.CharField(max_length=20, choices=StaffRole.choices, default=StaffRole.GROUP_LEADER)
    group_name = models.CharField(max_length=50, choices=YouthGroup.choices, blank=True)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['role', 'group_name'], name='users_role_group_idx'),
        ]

    def __str__(self):
        return self.email

    def clean(self):
        super().clean()
        if self.role == StaffRole.GROUP_LEADER and not self.group_name:
            raise ValidationError({'group_name': 'Group leaders must be attached to a group'})
        if self.role == StaffRole.ADMIN and self.group_name:
            raise ValidationError({'group_name': 'Admins are not attached to a group'})

    def get_display_name(self):
        """Return display name or email prefix."""
        return self.display_name or self.email.split('@')[0]

    @property
    def is_admin(self):
        return self.role == StaffRole.ADMIN

    def can_view_group(self, group_name):
        """Admins see every group, leaders only their own."""
        return self.is_admin or self.group_name == group_name
