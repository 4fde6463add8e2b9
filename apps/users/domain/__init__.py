from apps.users.domain.identity import ActorIdentity, ActorSession, RatingRole
from apps.users.domain.repositories import SessionValidator, UserRepository

__all__ = [
    "ActorIdentity",
    "ActorSession",
    "RatingRole",
    "SessionValidator",
    "UserRepository",
]
