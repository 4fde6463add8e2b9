"""Booking domain models.

A request row records one rental lifecycle between a lessee and an offer.
Rows are never deleted; status changes go through the request lifecycle
state machine (apps.bookings.domain.state_machine).
"""

from __future__ import annotations

import uuid

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.infrastructure.fields import EncryptedCharField


class OfferRequest(models.Model):
    """A lessee's request to rent an offer for a range of days."""

    class Status(models.IntegerChoices):
        OPEN = 1, _("Open")
        ACCEPTED_BY_LESSOR = 2, _("Accepted by lessor")
        REJECTED_BY_LESSOR = 3, _("Rejected by lessor")
        ITEM_LENT_TO_LESSEE = 4, _("Item lent to lessee")
        ITEM_RETURNED_TO_LESSOR = 5, _("Item returned to lessor")
        CANCELED_BY_LESSOR = 6, _("Canceled by lessor")
        CANCELED_BY_LESSEE = 7, _("Canceled by lessee")
        TIMED_OUT = 8, _("Timed out")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    lessee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="offer_requests",
    )
    offer = models.ForeignKey(
        "offers.Offer",
        on_delete=models.CASCADE,
        related_name="requests",
    )
    status = models.PositiveSmallIntegerField(choices=Status.choices, default=Status.OPEN)
    from_date = models.DateField()
    to_date = models.DateField()
    message = models.TextField(blank=True)
    qr_code = EncryptedCharField(blank=True, default="")
    lessor_has_update = models.BooleanField(default=True)
    lessee_has_update = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Offer request")
        verbose_name_plural = _("Offer requests")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(to_date__gte=models.F("from_date")),
                name="offer_request_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["offer", "status"], name="request_offer_status_idx"),
            models.Index(fields=["lessee", "-created_at"], name="request_lessee_created_idx"),
            models.Index(fields=["status", "created_at"], name="request_status_created_idx"),
        ]

    def __str__(self) -> str:
        return f"Request {self.id} for {self.offer_id} ({self.get_status_display()})"
