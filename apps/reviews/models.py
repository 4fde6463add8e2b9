"""Models for the ratings domain.

Two kinds of rating exist: an ``OfferRating`` scores an offer, a
``UserRating`` scores a user either as lessor or as lessee. An owner rates
each target at most once; the running mean and count of every target are
stored on the offer or user row.
"""

from __future__ import annotations

import uuid

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.reviews.domain import RATING_MAX, RATING_MIN, RATING_TEXT_MAX_LENGTH


class RatingFields(models.Model):
    """Score, texts and timestamps common to both rating kinds."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(RATING_MIN + 1), MaxValueValidator(RATING_MAX)],
    )
    headline = models.CharField(max_length=RATING_TEXT_MAX_LENGTH, blank=True)
    rating_text = models.CharField(max_length=RATING_TEXT_MAX_LENGTH, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class OfferRating(RatingFields):
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="offer_ratings"
    )
    offer = models.ForeignKey("offers.Offer", on_delete=models.CASCADE, related_name="ratings")

    class Meta:
        verbose_name = _("Offer rating")
        verbose_name_plural = _("Offer ratings")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["owner", "offer"], name="unique_offer_rating_per_owner"),
        ]
        indexes = [
            models.Index(fields=["offer", "-created_at"], name="offer_rating_offer_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.owner_id} rated offer {self.offer_id}: {self.rating}"


class UserRating(RatingFields):
    class RatingType(models.TextChoices):
        LESSOR = "lessor", _("As lessor")
        LESSEE = "lessee", _("As lessee")

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="given_user_ratings"
    )
    rated_user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="received_user_ratings"
    )
    rating_type = models.CharField(max_length=6, choices=RatingType.choices)

    class Meta:
        verbose_name = _("User rating")
        verbose_name_plural = _("User ratings")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["owner", "rated_user", "rating_type"],
                name="unique_user_rating_per_owner_and_type",
            ),
            models.CheckConstraint(
                condition=~models.Q(owner=models.F("rated_user")),
                name="user_rating_not_self",
            ),
        ]
        indexes = [
            models.Index(fields=["rated_user", "rating_type", "-created_at"], name="user_rating_target_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.owner_id} rated {self.rating_type} {self.rated_user_id}: {self.rating}"
