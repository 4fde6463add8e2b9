"""Offer domain models.

Offers are never physically deleted: deleting one flips its status to
``DELETED`` and clears its calendar, so bookings and ratings keep their
history.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

OFFER_TITLE_MAX_LENGTH = 100


class Category(models.Model):
    """Catalogue category (tools, sports, electronics, ...)."""

    name = models.CharField(max_length=100, unique=True)
    picture_link = models.URLField(max_length=500, blank=True)

    class Meta:
        verbose_name = _("Category")
        verbose_name_plural = _("Categories")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Offer(models.Model):
    """An item offered for rent by its lessor."""

    class Status(models.IntegerChoices):
        CREATED = 1, _("Created")
        DELETED = -1, _("Deleted")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    lessor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="offers",
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="offers",
    )
    title = models.CharField(max_length=OFFER_TITLE_MAX_LENGTH)
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    rating = models.FloatField(default=0)
    number_of_ratings = models.PositiveIntegerField(default=0)
    status = models.SmallIntegerField(choices=Status.choices, default=Status.CREATED)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Offer")
        verbose_name_plural = _("Offers")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="offer_positive_price",
            ),
        ]
        indexes = [
            models.Index(fields=["lessor", "status"], name="offer_lessor_status_idx"),
            models.Index(fields=["category", "status"], name="offer_category_status_idx"),
        ]

    def __str__(self) -> str:
        return self.title

    @property
    def is_deleted(self) -> bool:
        return self.status == self.Status.DELETED


class OfferPicture(models.Model):
    """Reference to an uploaded picture of an offer."""

    offer = models.ForeignKey(Offer, on_delete=models.CASCADE, related_name="pictures")
    link = models.CharField(max_length=500)
    order = models.PositiveSmallIntegerField(default=0)

    class Meta:
        ordering = ["order", "id"]

    def __str__(self) -> str:
        return self.link


class OfferBlockedPeriod(models.Model):
    """Inclusive range of days during which the offer cannot be booked."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    offer = models.ForeignKey(
        Offer,
        on_delete=models.CASCADE,
        related_name="blocked_periods",
    )
    from_date = models.DateField()
    to_date = models.DateField()
    is_lessor = models.BooleanField(
        default=True,
        help_text=_("Manual block by the lessor; unset for accepted bookings."),
    )
    reason = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Blocked period")
        verbose_name_plural = _("Blocked periods")
        ordering = ["from_date"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(to_date__gte=models.F("from_date")),
                name="blocked_period_valid_range",
            ),
        ]
        indexes = [
            models.Index(fields=["offer", "from_date", "to_date"], name="blocked_period_range_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.offer_id}: {self.from_date} - {self.to_date}"
