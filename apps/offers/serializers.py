"""Serializers for the offer endpoints."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from apps.offers.application.services import BlockedDates
from shared.domain.value_objects import DateRange
from shared.infrastructure.serializer_fields import DayField

from .models import OFFER_TITLE_MAX_LENGTH


class BlockedDatesSerializer(serializers.Serializer):
    from_date = DayField(required=False, allow_null=True)
    to_date = DayField(required=False, allow_null=True)
    reason = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)

    def to_blocked_dates(self, data) -> BlockedDates:  # type: ignore
        # DateRange raises BadRequestError for missing or inverted dates
        return BlockedDates(
            dates=DateRange(data.get("from_date"), data.get("to_date")),
            reason=data.get("reason", ""),
        )


class ReplaceBlockedDatesSerializer(serializers.Serializer):
    blocked_dates = BlockedDatesSerializer(many=True)

    def blocked_dates_list(self) -> list[BlockedDates]:
        item = BlockedDatesSerializer()
        return [item.to_blocked_dates(data) for data in self.validated_data["blocked_dates"]]


class OfferCreateSerializer(ReplaceBlockedDatesSerializer):
    """Offer submitted by a lessor, optionally with initial manual blocks."""

    title = serializers.CharField(max_length=OFFER_TITLE_MAX_LENGTH)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0.01"))
    category_id = serializers.IntegerField(required=False, allow_null=True)
    blocked_dates = BlockedDatesSerializer(many=True, default=list)


class BlockedIntervalSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    from_date = serializers.DateField(source="dates.from_date")
    to_date = serializers.DateField(source="dates.to_date")
    is_lessor = serializers.BooleanField()
    reason = serializers.CharField()


class OfferSerializer(serializers.Serializer):
    """Read representation of an Offer domain value."""

    id = serializers.UUIDField()
    lessor_id = serializers.UUIDField()
    title = serializers.CharField()
    description = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    category_id = serializers.IntegerField(allow_null=True)
    rating = serializers.FloatField(source="rating.mean")
    number_of_ratings = serializers.IntegerField(source="rating.count")
