"""URL routing for offer requests."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import RequestViewSet

router = DefaultRouter()
router.register(r"", RequestViewSet, basename="request")

urlpatterns = [
    path("", include(router.urls)),
]
