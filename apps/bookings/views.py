"""API views for offer requests."""

from __future__ import annotations

from uuid import UUID

from drf_spectacular.utils import OpenApiParameter, extend_schema  # type: ignore
from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.bookings import container
from apps.bookings.application.command_handlers import HandleRequestCommand
from apps.users.sessions import session_from_request
from shared.domain.errors import BadRequestError
from shared.infrastructure.routing import UUID_LOOKUP_REGEX

from .filters import RequestFilterSet
from .models import OfferRequest
from .serializers import HandleRequestSerializer, OfferRequestSerializer, RequestViewSerializer


class RequestViewSet(viewsets.ViewSet):
    """Requests where the caller is the lessee or the offer's lessor."""

    permission_classes = [permissions.AllowAny]
    lookup_value_regex = UUID_LOOKUP_REGEX

    @extend_schema(
        parameters=[
            OpenApiParameter("status", int, description="Request status id"),
            OpenApiParameter("role", str, enum=["lessor", "lessee"]),
            OpenApiParameter("offer", str, description="Offer id"),
        ],
        responses=RequestViewSerializer(many=True),
    )
    def list(self, request):  # type: ignore
        filterset = RequestFilterSet(request.query_params, queryset=OfferRequest.objects.none())
        if not filterset.is_valid():
            raise BadRequestError(f"Invalid filters: {dict(filterset.errors)}")

        views = container.list_requests_handler().handle(
            session_from_request(request), filterset.to_filters(),
        )
        return Response(RequestViewSerializer(views, many=True).data)

    @extend_schema(responses=RequestViewSerializer)
    def retrieve(self, request, pk=None):  # type: ignore
        view = container.get_request_handler().handle(session_from_request(request), UUID(pk))
        return Response(RequestViewSerializer(view).data)

    @extend_schema(request=HandleRequestSerializer, responses=OfferRequestSerializer)
    def partial_update(self, request, pk=None):  # type: ignore
        serializer = HandleRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        updated = container.handle_request_handler().handle(HandleRequestCommand(
            session=session_from_request(request),
            request_id=UUID(pk),
            desired_status=serializer.validated_data["status"],
            qr_code=serializer.validated_data.get("qr_code"),
        ))
        return Response(OfferRequestSerializer(updated).data)
