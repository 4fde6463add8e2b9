"""API views for offer and user ratings."""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema  # type: ignore
from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.reviews import container
from apps.reviews.domain import RatingTarget
from apps.users.domain import RatingRole
from apps.users.sessions import session_from_request

from .serializers import (
    PageQuerySerializer,
    RatingInputSerializer,
    RatingSerializer,
    RatingTypeQuerySerializer,
    UserRatingInputSerializer,
)

PAGE_PARAMETERS = [
    OpenApiParameter("limit", int),
    OpenApiParameter("offset", int),
]


class RatingsView(APIView):
    """
    Shared handling of ``GET/POST/PATCH/DELETE .../ratings/``.

    Subclasses say how the rating target is read from the request.
    """

    permission_classes = [permissions.AllowAny]
    input_serializer_class = RatingInputSerializer

    def target_for_write(self, data, **kwargs) -> RatingTarget:  # type: ignore
        raise NotImplementedError

    def target_for_read(self, request, **kwargs) -> RatingTarget:  # type: ignore
        raise NotImplementedError

    def get(self, request, **kwargs):  # type: ignore
        page = PageQuerySerializer(data=request.query_params)
        page.is_valid(raise_exception=True)

        ratings = container.rating_service().list_ratings(
            self.target_for_read(request, **kwargs),
            limit=page.validated_data.get("limit"),
            offset=page.validated_data.get("offset", 0),
        )
        return Response(RatingSerializer(ratings, many=True).data)

    def post(self, request, **kwargs):  # type: ignore
        return self._write(request, container.rating_service().rate, status.HTTP_201_CREATED, **kwargs)

    def patch(self, request, **kwargs):  # type: ignore
        return self._write(request, container.rating_service().update, status.HTTP_200_OK, **kwargs)

    def delete(self, request, **kwargs):  # type: ignore
        container.rating_service().delete(
            session_from_request(request),
            self.target_for_read(request, **kwargs),
        )
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _write(self, request, use_case, status_code, **kwargs):  # type: ignore
        serializer = self.input_serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        rating = use_case(
            session_from_request(request),
            self.target_for_write(data, **kwargs),
            data["rating"],
            headline=data.get("headline"),
            text=data.get("rating_text"),
        )
        return Response(RatingSerializer(rating).data, status=status_code)


@extend_schema(parameters=PAGE_PARAMETERS)
class OfferRatingsView(RatingsView):
    def target_for_write(self, data, offer_id=None):  # type: ignore
        return RatingTarget.offer(offer_id)

    def target_for_read(self, request, offer_id=None):  # type: ignore
        return RatingTarget.offer(offer_id)


@extend_schema(parameters=[*PAGE_PARAMETERS, OpenApiParameter("rating_type", str, enum=["lessor", "lessee"])])
class UserRatingsView(RatingsView):
    """``rating_type`` comes with the body on writes and as a query parameter otherwise."""

    input_serializer_class = UserRatingInputSerializer

    def target_for_write(self, data, user_id=None):  # type: ignore
        return RatingTarget.user(user_id, RatingRole(data["rating_type"]))

    def target_for_read(self, request, user_id=None):  # type: ignore
        query = RatingTypeQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        return RatingTarget.user(user_id, RatingRole(query.validated_data["rating_type"]))
