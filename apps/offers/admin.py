"""Admin registrations for offers and their calendar."""

from __future__ import annotations

from django.contrib import admin

from .models import Category, Offer, OfferBlockedPeriod, OfferPicture


class OfferPictureInline(admin.TabularInline):
    model = OfferPicture
    extra = 0


class OfferBlockedPeriodInline(admin.TabularInline):
    model = OfferBlockedPeriod
    extra = 0
    fields = ("from_date", "to_date", "is_lessor", "reason")


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name",)
    search_fields = ("name",)


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    list_display = ("title", "lessor", "category", "price", "rating", "number_of_ratings", "status")
    list_filter = ("status", "category")
    search_fields = ("title", "lessor__email")
    readonly_fields = ("rating", "number_of_ratings", "created_at", "updated_at")
    raw_id_fields = ("lessor",)
    inlines = [OfferPictureInline, OfferBlockedPeriodInline]


@admin.register(OfferBlockedPeriod)
class OfferBlockedPeriodAdmin(admin.ModelAdmin):
    list_display = ("offer", "from_date", "to_date", "is_lessor", "reason")
    list_filter = ("is_lessor",)
    search_fields = ("offer__title",)
