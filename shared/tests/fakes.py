"""In-memory implementations of the collaborator interfaces for unit tests."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from apps.bookings.domain import OfferRequest, RequestFilters, RequestRepository, RequestStatus
from apps.chat.domain import Messaging, SystemMessageType
from apps.offers.domain import BlockedInterval, IntervalRepository, Offer, OfferRepository
from apps.reviews.domain import Rating, RatingRepository, RatingTarget
from apps.users.domain import ActorIdentity, ActorSession, RatingRole, SessionValidator, UserRepository
from shared.application.uow import AbstractUnitOfWork
from shared.domain.errors import UnauthorizedError
from shared.domain.value_objects import RatingAggregate


class FakeUnitOfWork(AbstractUnitOfWork):
    def commit(self):
        pass

    def rollback(self):
        pass


class FakeSessionValidator(SessionValidator):
    def __init__(self):
        self.sessions: dict[str, UUID] = {}

    def login(self, user_id: UUID) -> ActorSession:
        session = ActorSession(session_id=f"session-{user_id}", user_id=user_id)
        self.sessions[session.session_id] = user_id
        return session

    def validate(self, session: ActorSession | None) -> ActorIdentity:
        if session is None or self.sessions.get(session.session_id) != session.user_id:
            raise UnauthorizedError("Session is invalid or expired")
        return ActorIdentity(user_id=session.user_id)


class FakeUserRepository(UserRepository):
    def __init__(self):
        self.users: dict[UUID, ActorIdentity] = {}
        self.locked: list[UUID] = []

    def add(self, user_id: UUID) -> ActorIdentity:
        self.users[user_id] = ActorIdentity(user_id=user_id)
        return self.users[user_id]

    def get(self, user_id: UUID, lock: bool = False) -> ActorIdentity | None:
        if lock:
            self.locked.append(user_id)
        return self.users.get(user_id)

    def save_rating(self, user_id: UUID, role: RatingRole, aggregate: RatingAggregate) -> None:
        field = "lessor_rating" if role is RatingRole.LESSOR else "lessee_rating"
        current = self.users[user_id]
        self.users[user_id] = ActorIdentity(
            user_id=user_id,
            email=current.email,
            lessor_rating=aggregate if field == "lessor_rating" else current.lessor_rating,
            lessee_rating=aggregate if field == "lessee_rating" else current.lessee_rating,
        )


class FakeOfferRepository(OfferRepository):
    def __init__(self):
        self.offers: dict[UUID, Offer] = {}
        self.locked: list[UUID] = []

    def get(self, offer_id: UUID, lock: bool = False) -> Offer | None:
        if lock:
            self.locked.append(offer_id)
        return self.offers.get(offer_id)

    def save(self, offer: Offer) -> Offer:
        self.offers[offer.id] = offer
        return offer


class FakeIntervalRepository(IntervalRepository):
    def __init__(self):
        self.intervals: list[BlockedInterval] = []

    def list_for_offer(self, offer_id: UUID) -> list[BlockedInterval]:
        return sorted(
            (interval for interval in self.intervals if interval.offer_id == offer_id),
            key=lambda interval: interval.dates.from_date,
        )

    def insert(self, interval: BlockedInterval) -> BlockedInterval:
        self.intervals.append(interval)
        return interval

    def delete_for_actor(self, offer_id: UUID, is_lessor: bool) -> int:
        kept = [i for i in self.intervals if not (i.offer_id == offer_id and i.is_lessor == is_lessor)]
        removed = len(self.intervals) - len(kept)
        self.intervals = kept
        return removed

    def delete_for_offer(self, offer_id: UUID) -> int:
        kept = [i for i in self.intervals if i.offer_id != offer_id]
        removed = len(self.intervals) - len(kept)
        self.intervals = kept
        return removed


class FakeRequestRepository(RequestRepository):
    def __init__(self):
        self.requests: dict[UUID, OfferRequest] = {}

    def get(self, request_id: UUID, lock: bool = False) -> OfferRequest | None:
        return self.requests.get(request_id)

    def save(self, request: OfferRequest) -> OfferRequest:
        self.requests[request.id] = request
        return request

    def list_by_user(self, user_id: UUID, filters: RequestFilters) -> list[OfferRequest]:
        found = []
        for request in self.requests.values():
            role = request.role_of(user_id)
            if role is None or (filters.role is not None and role is not filters.role):
                continue
            if filters.status is not None and request.status != filters.status:
                continue
            if filters.offer_id is not None and request.offer_id != filters.offer_id:
                continue
            found.append(request)
        return sorted(found, key=lambda r: r.created_at, reverse=True)

    def list_open_created_before(self, cutoff: datetime) -> list[OfferRequest]:
        return sorted(
            (r for r in self.requests.values() if r.status == RequestStatus.OPEN and r.created_at < cutoff),
            key=lambda r: r.created_at,
        )

    def exists_for_offer(self, lessee_id: UUID, offer_id: UUID) -> bool:
        return any(r.lessee_id == lessee_id and r.offer_id == offer_id for r in self.requests.values())

    def exists_between(self, lessee_id: UUID, lessor_id: UUID) -> bool:
        return any(r.lessee_id == lessee_id and r.lessor_id == lessor_id for r in self.requests.values())


class FakeMessaging(Messaging):
    def __init__(self):
        self.sent: list[tuple[UUID, UUID, UUID, SystemMessageType]] = []

    def emit_system_message(self, from_user_id, to_user_id, request_id, message_type) -> None:
        self.sent.append((from_user_id, to_user_id, request_id, message_type))


class FakeRatingRepository(RatingRepository):
    def __init__(self):
        self.ratings: dict[UUID, Rating] = {}

    def find(self, owner_id: UUID, target: RatingTarget) -> Rating | None:
        for rating in self.ratings.values():
            if rating.owner_id == owner_id and rating.target == target:
                return rating
        return None

    def save(self, rating: Rating) -> Rating:
        self.ratings[rating.id] = rating
        return rating

    def delete(self, rating: Rating) -> None:
        self.ratings.pop(rating.id, None)

    def aggregate(self, target: RatingTarget) -> RatingAggregate:
        return RatingAggregate.from_values(r.value for r in self.ratings.values() if r.target == target)

    def list_for_target(self, target: RatingTarget, limit: int, offset: int = 0) -> list[Rating]:
        matching = [r for r in self.ratings.values() if r.target == target]
        return list(reversed(matching))[offset:offset + limit]


__all__ = [
    "FakeIntervalRepository",
    "FakeMessaging",
    "FakeOfferRepository",
    "FakeRatingRepository",
    "FakeRequestRepository",
    "FakeSessionValidator",
    "FakeUnitOfWork",
    "FakeUserRepository",
]
