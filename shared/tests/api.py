"""Helpers for API tests: users with live sessions and authenticated clients."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.utils import timezone
from rest_framework.test import APITestCase

from apps.offers.models import Offer
from apps.users.models import CustomUser, UserSession


class MarketplaceAPITestCase(APITestCase):
    """APITestCase that knows how to log users in with session headers."""

    def create_user(self, email: str) -> CustomUser:
        user = CustomUser.objects.create_user(email=email, password="Secret123!")
        user.session = UserSession.objects.open_for(user)
        return user

    def create_offer(self, lessor: CustomUser, title: str = "Cordless drill") -> Offer:
        return Offer.objects.create(lessor=lessor, title=title, price=Decimal("15.00"))

    def login_as(self, user: CustomUser | None) -> None:
        if user is None:
            self.client.credentials()
            return
        self.client.credentials(
            HTTP_X_SESSION_ID=user.session.session_id,
            HTTP_X_USER_ID=str(user.id),
        )

    @staticmethod
    def days_ahead(days: int) -> str:
        return str(timezone.localdate() + timedelta(days=days))
