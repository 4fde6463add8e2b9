"""Integration tests for offer API endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status

from apps.offers.models import Offer, OfferBlockedPeriod
from shared.tests.api import MarketplaceAPITestCase


class OfferAPITests(MarketplaceAPITestCase):
    def setUp(self) -> None:
        self.lessor = self.create_user("lessor@example.com")
        self.lessee = self.create_user("lessee@example.com")
        self.list_url = reverse("offer-list")

    def _create(self, **overrides):
        payload = {
            "title": "Camping tent",
            "description": "Four people, waterproof",
            "price": "25.00",
            "blocked_dates": [
                {"from_date": self.days_ahead(3), "to_date": self.days_ahead(4), "reason": "Own trip"},
            ],
        }
        payload.update(overrides)
        self.login_as(self.lessor)
        return self.client.post(self.list_url, payload, format="json")

    def test_create_offer_with_blocked_dates(self) -> None:
        response = self._create()

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["lessor_id"], str(self.lessor.id))
        self.assertEqual(response.data["rating"], 0)
        self.assertEqual(len(response.data["blocked_dates"]), 1)
        self.assertTrue(response.data["blocked_dates"][0]["is_lessor"])

    def test_create_offer_validation(self) -> None:
        no_price = self._create(price="0")
        overlapping = self._create(blocked_dates=[
            {"from_date": self.days_ahead(3), "to_date": self.days_ahead(6)},
            {"from_date": self.days_ahead(5), "to_date": self.days_ahead(8)},
        ])
        self.login_as(None)
        anonymous = self.client.post(self.list_url, {"title": "Tent", "price": "10"}, format="json")

        self.assertEqual(no_price.status_code, status.HTTP_400_BAD_REQUEST, no_price.data)
        self.assertEqual(overlapping.status_code, status.HTTP_409_CONFLICT, overlapping.data)
        self.assertEqual(anonymous.status_code, status.HTTP_401_UNAUTHORIZED, anonymous.data)
        self.assertEqual(Offer.objects.count(), 0)

    def test_retrieve_shows_only_upcoming_blocks(self) -> None:
        offer_id = self._create().data["id"]
        OfferBlockedPeriod.objects.create(
            offer_id=offer_id,
            from_date=self.days_ahead(-10),
            to_date=self.days_ahead(-8),
        )

        response = self.client.get(reverse("offer-detail", kwargs={"pk": offer_id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(response.data["blocked_dates"]), 1)

    def test_replace_blocked_dates_keeps_booking_blocks(self) -> None:
        offer_id = self._create().data["id"]
        OfferBlockedPeriod.objects.create(
            offer_id=offer_id,
            from_date=self.days_ahead(10),
            to_date=self.days_ahead(12),
            is_lessor=False,
        )
        url = reverse("offer-blocked-dates", kwargs={"pk": offer_id})

        replaced = self.client.put(
            url,
            {"blocked_dates": [{"from_date": self.days_ahead(20), "to_date": self.days_ahead(21)}]},
            format="json",
        )
        clashing = self.client.put(
            url,
            {"blocked_dates": [{"from_date": self.days_ahead(11), "to_date": self.days_ahead(13)}]},
            format="json",
        )

        self.assertEqual(replaced.status_code, status.HTTP_200_OK, replaced.data)
        self.assertEqual(
            sorted((item["is_lessor"], item["from_date"]) for item in replaced.data),
            [(False, self.days_ahead(10)), (True, self.days_ahead(20))],
        )
        self.assertEqual(clashing.status_code, status.HTTP_409_CONFLICT, clashing.data)
        self.assertEqual(OfferBlockedPeriod.objects.filter(offer_id=offer_id).count(), 2)

    def test_only_lessor_can_change_offer(self) -> None:
        offer_id = self._create().data["id"]
        self.login_as(self.lessee)

        blocked = self.client.put(
            reverse("offer-blocked-dates", kwargs={"pk": offer_id}), {"blocked_dates": []}, format="json",
        )
        deleted = self.client.delete(reverse("offer-detail", kwargs={"pk": offer_id}))

        self.assertEqual(blocked.status_code, status.HTTP_403_FORBIDDEN, blocked.data)
        self.assertEqual(deleted.status_code, status.HTTP_403_FORBIDDEN, deleted.data)

    def test_delete_hides_offer_and_clears_calendar(self) -> None:
        offer_id = self._create().data["id"]

        response = self.client.delete(reverse("offer-detail", kwargs={"pk": offer_id}))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertTrue(Offer.objects.get(id=offer_id).is_deleted)
        self.assertFalse(OfferBlockedPeriod.objects.filter(offer_id=offer_id).exists())
        self.assertEqual(
            self.client.get(reverse("offer-detail", kwargs={"pk": offer_id})).status_code,
            status.HTTP_404_NOT_FOUND,
        )

        self.login_as(self.lessee)
        booking = self.client.post(
            reverse("offer-book", kwargs={"pk": offer_id}),
            {"from_date": self.days_ahead(1), "to_date": self.days_ahead(2)},
            format="json",
        )
        self.assertEqual(booking.status_code, status.HTTP_404_NOT_FOUND, booking.data)
