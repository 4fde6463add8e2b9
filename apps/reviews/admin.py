"""Admin registrations for ratings."""

from __future__ import annotations

from django.contrib import admin

from .models import OfferRating, UserRating


@admin.register(OfferRating)
class OfferRatingAdmin(admin.ModelAdmin):
    list_display = ("offer", "owner", "rating", "headline", "created_at")
    list_filter = ("rating",)
    search_fields = ("offer__title", "owner__email", "headline")
    raw_id_fields = ("offer", "owner")


@admin.register(UserRating)
class UserRatingAdmin(admin.ModelAdmin):
    list_display = ("rated_user", "rating_type", "owner", "rating", "created_at")
    list_filter = ("rating_type", "rating")
    search_fields = ("rated_user__email", "owner__email", "headline")
    raw_id_fields = ("rated_user", "owner")
