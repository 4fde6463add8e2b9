"""URL routing for offers."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import OfferViewSet

router = DefaultRouter()
router.register(r"", OfferViewSet, basename="offer")

urlpatterns = [
    path("", include(router.urls)),
]
