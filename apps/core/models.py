"""
Core models: the shop's user accounts.
"""

from django.contrib.auth.models import AbstractUser
from django.db import models


def avatar_upload_path(instance, filename):
    return f"avatars/user_{instance.pk or 'new'}/{filename}"


class User(AbstractUser):
    """
    Shop staff account.

    Extends Django's user with a display name, an optional avatar and a
    role. Authentication is session based; passwords are hashed by the
    configured PASSWORD_HASHERS.
    """

    # Role choices
    USER = "user"
    ADMIN = "admin"

    ROLE_CHOICES = [
        (USER, "User"),
        (ADMIN, "Administrator"),
    ]

    name = models.CharField(
        max_length=255,
        blank=True,
        help_text="Display name shown in the dashboard",
    )

    avatar = models.ImageField(
        upload_to=avatar_upload_path,
        null=True,
        blank=True,
        help_text="Optional profile picture (JPEG, PNG or GIF)",
    )

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=USER,
        help_text="User's role in the shop",
    )

    class Meta:
        db_table = "users"
        ordering = ["username"]
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self):
        return f"{self.username} ({self.get_role_display()})"

    def is_shop_admin(self):
        """Check if user administers the shop."""
        return self.role == self.ADMIN
