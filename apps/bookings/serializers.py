"""Serializers for the booking endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.bookings.domain import RequestStatus
from shared.infrastructure.serializer_fields import DayField

STATUS_CHOICES = [(status.value, status.name) for status in RequestStatus]


class BookOfferSerializer(serializers.Serializer):
    """Input of ``POST /offers/{id}/book/``; missing dates are rejected by the use case."""

    from_date = DayField(required=False, allow_null=True)
    to_date = DayField(required=False, allow_null=True)
    message = serializers.CharField(required=False, allow_blank=True, default="")


class HandleRequestSerializer(serializers.Serializer):
    """Input of ``PATCH /requests/{id}/``."""

    status = serializers.ChoiceField(choices=STATUS_CHOICES)
    qr_code = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=32)

    def validate_status(self, value):  # type: ignore
        return RequestStatus(int(value))


class OfferRequestSerializer(serializers.Serializer):
    """Read representation of an OfferRequest domain value."""

    id = serializers.UUIDField()
    offer_id = serializers.UUIDField()
    lessee_id = serializers.UUIDField()
    lessor_id = serializers.UUIDField()
    status = serializers.SerializerMethodField()
    status_name = serializers.SerializerMethodField()
    from_date = serializers.DateField(source="dates.from_date")
    to_date = serializers.DateField(source="dates.to_date")
    message = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_status(self, obj) -> int:  # type: ignore
        return int(obj.status)

    def get_status_name(self, obj) -> str:  # type: ignore
        return obj.status.name


class RequestViewSerializer(serializers.Serializer):
    """A request as seen by one of its parties, with the QR code when it is theirs to show."""

    request = OfferRequestSerializer()
    role = serializers.SerializerMethodField()
    has_update = serializers.BooleanField()
    qr_code = serializers.CharField(allow_null=True)

    def get_role(self, obj) -> str:  # type: ignore
        return obj.role.value

    def to_representation(self, instance):  # type: ignore
        data = super().to_representation(instance)
        flat = data.pop("request")
        flat.update(data)
        return flat
