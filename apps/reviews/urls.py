"""URL routing for ratings, nested under offers and users."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import OfferRatingsView, UserRatingsView

urlpatterns = [
    path("offers/<uuid:offer_id>/ratings/", OfferRatingsView.as_view(), name="offer-ratings"),
    path("users/<uuid:user_id>/ratings/", UserRatingsView.as_view(), name="user-ratings"),
]
