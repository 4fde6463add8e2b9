"""
Collaborator interfaces for the users context.

Use cases depend on these, never on the ORM.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from apps.users.domain.identity import ActorIdentity, ActorSession, RatingRole
from shared.domain.value_objects import RatingAggregate


class SessionValidator(ABC):
    """Resolves presented credentials into a validated actor."""

    @abstractmethod
    def validate(self, session: ActorSession | None) -> ActorIdentity:
        """
        Return the actor owning the session.

        Raises:
            UnauthorizedError: If the session is missing, unknown, expired
                or belongs to another user.
        """
        ...


class UserRepository(ABC):
    """Interface for user lookups needed by the rating engine."""

    @abstractmethod
    def get(self, user_id: UUID, lock: bool = False) -> ActorIdentity | None:
        """Return an active user by ID, or None if not found.

        With lock=True the user row stays locked until the surrounding
        transaction ends.
        """
        ...

    @abstractmethod
    def save_rating(self, user_id: UUID, role: RatingRole, aggregate: RatingAggregate) -> None:
        """Write the lessor or lessee rating aggregate onto the user."""
        ...
