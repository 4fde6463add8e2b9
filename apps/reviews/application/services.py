"""
Rating use cases

- rate: create a rating, a second rating of the same target is refused
- update: change the actor's rating, creating it when there is none yet
- delete: remove the actor's rating
- list_ratings: ratings of an offer or user, newest first

Every write recomputes the target's (mean, count) and stores it on the
offer or user in the same transaction.
"""

from typing import Callable
import logging

from apps.offers.domain import Offer, OfferRepository
from apps.reviews.domain import (
    Rating,
    RatingEligibility,
    RatingRepository,
    RatingTarget,
    TargetKind,
    validate_rating_input,
)
from apps.users.domain import ActorIdentity, ActorSession, SessionValidator, UserRepository
from shared.application.uow import AbstractUnitOfWork
from shared.domain.errors import BadRequestError, ForbiddenError, NotFoundError
from shared.domain.value_objects import RatingAggregate

logger = logging.getLogger(__name__)


class RatingService:
    def __init__(
        self,
        sessions: SessionValidator,
        offers: OfferRepository,
        users: UserRepository,
        ratings: RatingRepository,
        eligibility: RatingEligibility,
        uow: Callable[[], AbstractUnitOfWork],
        default_limit: int = 10,
    ):
        self.sessions = sessions
        self.offers = offers
        self.users = users
        self.ratings = ratings
        self.eligibility = eligibility
        self.uow = uow
        self.default_limit = default_limit

    def rate(
        self,
        session: ActorSession | None,
        target: RatingTarget,
        value,
        headline: str | None = None,
        text: str | None = None,
    ) -> Rating:
        """
        Create the actor's rating of the target.

        Raises:
            BadRequestError: Invalid score, headline or text
            UnauthorizedError: Session missing or invalid
            NotFoundError: Target offer or user does not exist
            ForbiddenError: Actor not eligible, or already rated the target
        """
        value, headline, text = validate_rating_input(value, headline, text)
        actor = self.sessions.validate(session)

        with self.uow():
            self._ensure_eligible(actor, target)
            if self.ratings.find(actor.user_id, target) is not None:
                raise ForbiddenError(f"You already rated this {target.kind.value}")

            rating = self.ratings.save(Rating(
                owner_id=actor.user_id,
                target=target,
                value=value,
                headline=headline,
                text=text,
            ))
            aggregate = self._recompute(target)

        logger.info(f"{rating} saved, {target} now at {aggregate.mean} over {aggregate.count}")
        return rating

    def update(
        self,
        session: ActorSession | None,
        target: RatingTarget,
        value,
        headline: str | None = None,
        text: str | None = None,
    ) -> Rating:
        """Update the actor's rating of the target, or create it if missing."""
        value, headline, text = validate_rating_input(value, headline, text)
        actor = self.sessions.validate(session)

        with self.uow():
            self._ensure_eligible(actor, target)
            existing = self.ratings.find(actor.user_id, target)
            if existing is None:
                rating = Rating(owner_id=actor.user_id, target=target, value=value, headline=headline, text=text)
            else:
                rating = existing.evolve(value=value, headline=headline, text=text)
            rating = self.ratings.save(rating)
            aggregate = self._recompute(target)

        logger.info(f"{rating} updated, {target} now at {aggregate.mean} over {aggregate.count}")
        return rating

    def delete(self, session: ActorSession | None, target: RatingTarget) -> None:
        actor = self.sessions.validate(session)

        with self.uow():
            self._load_target(target, lock=True)
            rating = self.ratings.find(actor.user_id, target)
            if rating is None:
                raise NotFoundError("Rating")
            self.ratings.delete(rating)
            aggregate = self._recompute(target)

        logger.info(f"Rating {rating.id} deleted, {target} now at {aggregate.mean} over {aggregate.count}")

    def list_ratings(self, target: RatingTarget, limit: int | None = None, offset: int = 0) -> list[Rating]:
        limit = self.default_limit if limit is None else limit
        if limit < 0 or offset < 0:
            raise BadRequestError("limit and offset must not be negative")
        self._load_target(target)
        return self.ratings.list_for_target(target, limit, offset)

    def _load_target(self, target: RatingTarget, lock: bool = False) -> Offer | ActorIdentity:
        if target.kind is TargetKind.OFFER:
            offer = self.offers.get(target.target_id, lock=lock)
            if offer is None or offer.is_deleted:
                raise NotFoundError("Offer", target.target_id)
            return offer

        user = self.users.get(target.target_id, lock=lock)
        if user is None:
            raise NotFoundError("User", target.target_id)
        return user

    def _ensure_eligible(self, actor: ActorIdentity, target: RatingTarget) -> None:
        # Offer row stays locked until the aggregate is written back
        loaded = self._load_target(target, lock=True)
        if target.kind is TargetKind.OFFER:
            self.eligibility.ensure_can_rate_offer(actor.user_id, loaded)
        else:
            self.eligibility.ensure_can_rate_user(actor.user_id, target)

    def _recompute(self, target: RatingTarget) -> RatingAggregate:
        aggregate = self.ratings.aggregate(target)
        if target.kind is TargetKind.OFFER:
            offer = self.offers.get(target.target_id)
            self.offers.save(offer.evolve(rating=aggregate))
        else:
            self.users.save_rating(target.target_id, target.role, aggregate)
        return aggregate
