"""Identity primitives passed into every use case."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from shared.domain.base import ValueObject
from shared.domain.value_objects import RatingAggregate


class RatingRole(Enum):
    """Which of a user's two reputations a rating feeds."""

    LESSOR = "lessor"
    LESSEE = "lessee"


@dataclass(frozen=True)
class ActorSession(ValueObject):
    """Credentials a caller presents: the session id and the claimed user."""

    session_id: str
    user_id: UUID


@dataclass(frozen=True)
class ActorIdentity(ValueObject):
    """A user whose session has been validated, or a looked-up user."""

    user_id: UUID
    email: str = ""
    lessor_rating: RatingAggregate = RatingAggregate()
    lessee_rating: RatingAggregate = RatingAggregate()
