"""Django ORM implementations of the offers stores."""

from __future__ import annotations

from uuid import UUID

from apps.offers.domain import BlockedInterval, IntervalRepository, Offer, OfferRepository
from apps.offers.models import Offer as OfferModel
from apps.offers.models import OfferBlockedPeriod
from shared.domain.value_objects import DateRange, RatingAggregate
from shared.infrastructure.locking import lock_queryset_if_possible


def to_offer(model: OfferModel) -> Offer:
    return Offer(
        id=model.id,
        lessor_id=model.lessor_id,
        title=model.title,
        description=model.description,
        price=model.price,
        category_id=model.category_id,
        rating=RatingAggregate(model.rating, model.number_of_ratings),
        is_deleted=model.is_deleted,
    )


def to_interval(model: OfferBlockedPeriod) -> BlockedInterval:
    return BlockedInterval(
        id=model.id,
        offer_id=model.offer_id,
        dates=DateRange(model.from_date, model.to_date),
        is_lessor=model.is_lessor,
        reason=model.reason,
    )


class DjangoOfferRepository(OfferRepository):
    def get(self, offer_id: UUID, lock: bool = False) -> Offer | None:
        queryset = OfferModel.objects.filter(id=offer_id)
        if lock:
            queryset = lock_queryset_if_possible(queryset)
        model = queryset.first()
        return to_offer(model) if model else None

    def save(self, offer: Offer) -> Offer:
        OfferModel.objects.update_or_create(
            id=offer.id,
            defaults={
                "lessor_id": offer.lessor_id,
                "title": offer.title,
                "description": offer.description,
                "price": offer.price,
                "category_id": offer.category_id,
                "rating": offer.rating.mean,
                "number_of_ratings": offer.rating.count,
                "status": OfferModel.Status.DELETED if offer.is_deleted else OfferModel.Status.CREATED,
            },
        )
        return offer


class DjangoIntervalRepository(IntervalRepository):
    def list_for_offer(self, offer_id: UUID) -> list[BlockedInterval]:
        return [
            to_interval(model)
            for model in OfferBlockedPeriod.objects.filter(offer_id=offer_id).order_by("from_date")
        ]

    def insert(self, interval: BlockedInterval) -> BlockedInterval:
        OfferBlockedPeriod.objects.create(
            id=interval.id,
            offer_id=interval.offer_id,
            from_date=interval.dates.from_date,
            to_date=interval.dates.to_date,
            is_lessor=interval.is_lessor,
            reason=interval.reason,
        )
        return interval

    def delete_for_actor(self, offer_id: UUID, is_lessor: bool) -> int:
        deleted, _ = OfferBlockedPeriod.objects.filter(offer_id=offer_id, is_lessor=is_lessor).delete()
        return deleted

    def delete_for_offer(self, offer_id: UUID) -> int:
        deleted, _ = OfferBlockedPeriod.objects.filter(offer_id=offer_id).delete()
        return deleted
