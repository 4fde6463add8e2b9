"""Admin registration for offer requests."""

from __future__ import annotations

from django.contrib import admin

from .models import OfferRequest


@admin.register(OfferRequest)
class OfferRequestAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "offer",
        "lessee",
        "status",
        "from_date",
        "to_date",
        "lessor_has_update",
        "lessee_has_update",
        "created_at",
    )
    list_filter = ("status", "from_date", "to_date")
    search_fields = ("offer__title", "lessee__email")
    # QR codes are never shown, not even to staff
    exclude = ("qr_code",)
    readonly_fields = (
        "status",
        "lessor_has_update",
        "lessee_has_update",
        "created_at",
        "updated_at",
    )
    raw_id_fields = ("offer", "lessee")
