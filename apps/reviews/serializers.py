"""Serializers for the rating endpoints.

Input serializers only check shapes; range and length rules live in
apps.reviews.domain.policy so every entry point applies them in the same
order.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.domain import RatingRole


class RatingInputSerializer(serializers.Serializer):
    rating = serializers.JSONField()
    headline = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    rating_text = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)


class UserRatingInputSerializer(RatingInputSerializer):
    rating_type = serializers.ChoiceField(choices=[role.value for role in RatingRole])


class RatingTypeQuerySerializer(serializers.Serializer):
    rating_type = serializers.ChoiceField(choices=[role.value for role in RatingRole])


class PageQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(required=False, min_value=0)
    offset = serializers.IntegerField(required=False, min_value=0, default=0)


class RatingSerializer(serializers.Serializer):
    """Read representation of a Rating domain value."""

    id = serializers.UUIDField()
    owner_id = serializers.UUIDField()
    target_type = serializers.CharField(source="target.kind.value")
    target_id = serializers.UUIDField(source="target.target_id")
    rating_type = serializers.SerializerMethodField()
    rating = serializers.IntegerField(source="value")
    headline = serializers.CharField()
    rating_text = serializers.CharField(source="text")
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_rating_type(self, obj) -> str | None:  # type: ignore
        return obj.target.role.value if obj.target.role else None
