"""Django ORM implementation of the rating store."""

from __future__ import annotations

from uuid import UUID

from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import Avg, Count  # type: ignore

from apps.reviews.domain import Rating, RatingRepository, RatingTarget, TargetKind
from apps.reviews.models import OfferRating, UserRating
from apps.users.domain import RatingRole
from shared.domain.errors import ForbiddenError
from shared.domain.value_objects import RatingAggregate


def to_rating(model: OfferRating | UserRating) -> Rating:
    if isinstance(model, OfferRating):
        target = RatingTarget.offer(model.offer_id)
    else:
        target = RatingTarget.user(model.rated_user_id, RatingRole(model.rating_type))
    return Rating(
        id=model.id,
        owner_id=model.owner_id,
        target=target,
        value=model.rating,
        headline=model.headline,
        text=model.rating_text,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class DjangoRatingRepository(RatingRepository):
    def _queryset(self, target: RatingTarget):
        if target.kind is TargetKind.OFFER:
            return OfferRating.objects.filter(offer_id=target.target_id)
        return UserRating.objects.filter(rated_user_id=target.target_id, rating_type=target.role.value)

    def find(self, owner_id: UUID, target: RatingTarget) -> Rating | None:
        model = self._queryset(target).filter(owner_id=owner_id).first()
        return to_rating(model) if model else None

    def save(self, rating: Rating) -> Rating:
        defaults = {
            "owner_id": rating.owner_id,
            "rating": rating.value,
            "headline": rating.headline,
            "rating_text": rating.text,
        }
        target = rating.target
        try:
            # Nested atomic() runs as a savepoint
            with transaction.atomic():
                if target.kind is TargetKind.OFFER:
                    model, _ = OfferRating.objects.update_or_create(
                        id=rating.id, defaults={**defaults, "offer_id": target.target_id},
                    )
                else:
                    model, _ = UserRating.objects.update_or_create(
                        id=rating.id,
                        defaults={**defaults, "rated_user_id": target.target_id, "rating_type": target.role.value},
                    )
        except IntegrityError as exc:
            raise ForbiddenError(f"You already rated this {target.kind.value}") from exc
        return to_rating(model)

    def delete(self, rating: Rating) -> None:
        self._queryset(rating.target).filter(id=rating.id).delete()

    def aggregate(self, target: RatingTarget) -> RatingAggregate:
        result = self._queryset(target).aggregate(mean=Avg("rating"), count=Count("id"))
        return RatingAggregate.from_query(result["mean"], result["count"])

    def list_for_target(self, target: RatingTarget, limit: int, offset: int = 0) -> list[Rating]:
        queryset = self._queryset(target).order_by("-created_at")[offset:offset + limit]
        return [to_rating(model) for model in queryset]
