"""
Rating Domain Entities

- RatingTarget: what is being rated, an offer or a user in one of their roles
- Rating: one actor's score of one target
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from apps.users.domain import RatingRole
from shared.domain.base import Entity, ValueObject

# Valid scores lie in (RATING_MIN, RATING_MAX]; the minimum itself is rejected
RATING_MIN = 0
RATING_MAX = 5
RATING_TEXT_MAX_LENGTH = 400


class TargetKind(Enum):
    OFFER = 'offer'
    USER = 'user'


@dataclass(frozen=True)
class RatingTarget(ValueObject):
    """
    Rated offer, or rated user together with the role being rated

    A user has two independent reputations, as lessor and as lessee, so a
    user target always names one of them.
    """
    kind: TargetKind
    target_id: UUID
    role: RatingRole | None = None

    def __post_init__(self):
        if self.kind is TargetKind.USER and self.role is None:
            raise ValueError("A user rating target needs a role")
        if self.kind is TargetKind.OFFER and self.role is not None:
            raise ValueError("An offer rating target has no role")

    @classmethod
    def offer(cls, offer_id: UUID) -> 'RatingTarget':
        return cls(TargetKind.OFFER, offer_id)

    @classmethod
    def user(cls, user_id: UUID, role: RatingRole) -> 'RatingTarget':
        return cls(TargetKind.USER, user_id, role)

    def __str__(self):
        if self.role is None:
            return f"offer {self.target_id}"
        return f"{self.role.value} {self.target_id}"


@dataclass(frozen=True, eq=False, kw_only=True)
class Rating(Entity):
    """One owner's rating of one target; unique per (owner, target)"""

    owner_id: UUID
    target: RatingTarget
    value: int
    headline: str = ''
    text: str = ''
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __str__(self):
        return f"Rating {self.value}/{RATING_MAX} of {self.target} by {self.owner_id}"
