"""User domain models.

Users log in by email. A ``UserSession`` is the credential the client
presents with every call (``session_id`` + ``user_id``); it expires after
``settings.USER_SESSION_LIFETIME``.
"""

from __future__ import annotations

import secrets
import uuid
from typing import Any

from django.conf import settings  # type: ignore
from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class CustomUserManager(BaseUserManager):
    """User manager that uses the email as login."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("Email is required to create a user.")
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)


class CustomUser(AbstractUser):
    """Marketplace user. Any user can be lessor of own offers and lessee of others."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = None
    email = models.EmailField(_("email address"), unique=True)

    lessor_rating = models.FloatField(default=0)
    number_of_lessor_ratings = models.PositiveIntegerField(default=0)
    lessee_rating = models.FloatField(default=0)
    number_of_lessee_ratings = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS: list[str] = []

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["email"]

    def __str__(self) -> str:
        return self.get_full_name() or self.email


class UserSessionQuerySet(models.QuerySet):
    def active(self):
        return self.filter(expires_at__gt=timezone.now())


class UserSessionManager(models.Manager.from_queryset(UserSessionQuerySet)):  # type: ignore
    def open_for(self, user: CustomUser) -> "UserSession":
        """Create a fresh session for the user."""
        return self.create(
            user=user,
            session_id=UserSession.generate_session_id(),
            expires_at=timezone.now() + settings.USER_SESSION_LIFETIME,
        )


class UserSession(models.Model):
    """Login session presented by clients with every call."""

    session_id = models.CharField(max_length=64, unique=True, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sessions",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    expires_at = models.DateTimeField()

    objects = UserSessionManager()

    class Meta:
        verbose_name = _("User session")
        verbose_name_plural = _("User sessions")
        indexes = [
            models.Index(fields=["session_id", "user"], name="user_session_lookup_idx"),
        ]

    def __str__(self) -> str:
        return f"Session of {self.user_id} until {self.expires_at}"

    @staticmethod
    def generate_session_id() -> str:
        return secrets.token_hex(32)

    def is_expired(self) -> bool:
        return timezone.now() >= self.expires_at
