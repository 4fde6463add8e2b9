"""Tests for the periodic timeout sweep."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.test import TestCase, override_settings
from django.utils import timezone

from apps.bookings.models import OfferRequest
from apps.bookings.tasks import close_timed_out_requests
from apps.offers.models import Offer
from apps.users.models import CustomUser


@override_settings(REQUEST_OPEN_TIMEOUT_HOURS=72)
class CloseTimedOutRequestsTests(TestCase):
    def setUp(self) -> None:
        lessor = CustomUser.objects.create_user(email="lessor@example.com")
        self.lessee = CustomUser.objects.create_user(email="lessee@example.com")
        self.offer = Offer.objects.create(lessor=lessor, title="Kayak", price=Decimal("40.00"))

    def _request(self, age: timedelta, status=OfferRequest.Status.OPEN) -> OfferRequest:
        today = timezone.localdate()
        return OfferRequest.objects.create(
            lessee=self.lessee,
            offer=self.offer,
            status=status,
            from_date=today + timedelta(days=10),
            to_date=today + timedelta(days=12),
            created_at=timezone.now() - age,
        )

    def test_only_stale_open_requests_time_out(self) -> None:
        stale = self._request(timedelta(hours=80))
        fresh = self._request(timedelta(hours=2))
        answered = self._request(timedelta(hours=100), status=OfferRequest.Status.REJECTED_BY_LESSOR)

        result = close_timed_out_requests()

        self.assertEqual(result, {"timed_out": 1})
        stale.refresh_from_db()
        self.assertEqual(stale.status, OfferRequest.Status.TIMED_OUT)
        self.assertTrue(stale.lessor_has_update)
        self.assertTrue(stale.lessee_has_update)
        fresh.refresh_from_db()
        answered.refresh_from_db()
        self.assertEqual(fresh.status, OfferRequest.Status.OPEN)
        self.assertEqual(answered.status, OfferRequest.Status.REJECTED_BY_LESSOR)

    def test_sweep_is_idempotent(self) -> None:
        self._request(timedelta(hours=80))

        self.assertEqual(close_timed_out_requests(), {"timed_out": 1})
        self.assertEqual(close_timed_out_requests(), {"timed_out": 0})
