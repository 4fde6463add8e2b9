"""API views for offers and their availability."""

from __future__ import annotations

from uuid import UUID

from django.utils import timezone  # type: ignore
from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.bookings import container as bookings
from apps.bookings.application.command_handlers import BookOfferCommand
from apps.bookings.serializers import BookOfferSerializer, OfferRequestSerializer
from apps.offers import container
from apps.offers.application.services import CreateOfferCommand
from apps.users.sessions import session_from_request
from shared.infrastructure.routing import UUID_LOOKUP_REGEX

from .serializers import (
    BlockedIntervalSerializer,
    OfferCreateSerializer,
    OfferSerializer,
    ReplaceBlockedDatesSerializer,
)


def offer_payload(offer, intervals) -> dict:  # type: ignore
    """Offer with the blocked intervals that still lie ahead."""
    today = timezone.localdate()
    data = dict(OfferSerializer(offer).data)
    data["blocked_dates"] = BlockedIntervalSerializer(
        [interval for interval in intervals if interval.dates.to_date >= today],
        many=True,
    ).data
    return data


class OfferViewSet(viewsets.ViewSet):
    """Offers, their blocked dates and the booking entry point."""

    permission_classes = [permissions.AllowAny]
    lookup_value_regex = UUID_LOOKUP_REGEX

    @extend_schema(request=OfferCreateSerializer, responses={201: OfferSerializer})
    def create(self, request):  # type: ignore
        serializer = OfferCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        service = container.offer_service()
        offer = service.create_offer(CreateOfferCommand(
            session=session_from_request(request),
            title=data["title"],
            price=data["price"],
            description=data.get("description", ""),
            category_id=data.get("category_id"),
            blocked_dates=serializer.blocked_dates_list(),
        ))
        offer, intervals = service.get_offer(offer.id)
        return Response(offer_payload(offer, intervals), status=status.HTTP_201_CREATED)

    @extend_schema(responses=OfferSerializer)
    def retrieve(self, request, pk=None):  # type: ignore
        offer, intervals = container.offer_service().get_offer(UUID(pk))
        return Response(offer_payload(offer, intervals))

    def destroy(self, request, pk=None):  # type: ignore
        container.offer_service().delete_offer(session_from_request(request), UUID(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=ReplaceBlockedDatesSerializer, responses=BlockedIntervalSerializer(many=True))
    @action(detail=True, methods=["put"], url_path="blocked-dates")
    def blocked_dates(self, request, pk=None):  # type: ignore
        serializer = ReplaceBlockedDatesSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        intervals = container.offer_service().replace_blocked_dates(
            session_from_request(request),
            UUID(pk),
            serializer.blocked_dates_list(),
        )
        return Response(BlockedIntervalSerializer(intervals, many=True).data)

    @extend_schema(request=BookOfferSerializer, responses={201: OfferRequestSerializer})
    @action(detail=True, methods=["post"])
    def book(self, request, pk=None):  # type: ignore
        serializer = BookOfferSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        created = bookings.book_offer_handler().handle(BookOfferCommand(
            session=session_from_request(request),
            offer_id=UUID(pk),
            from_date=data.get("from_date"),
            to_date=data.get("to_date"),
            message=data.get("message", ""),
        ))
        return Response(OfferRequestSerializer(created).data, status=status.HTTP_201_CREATED)
