"""
Store interfaces (repository pattern) for the ratings context.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from apps.reviews.domain.entities import Rating, RatingTarget
from shared.domain.value_objects import RatingAggregate


class RatingRepository(ABC):
    """Interface for rating persistence and the aggregate recompute query."""

    @abstractmethod
    def find(self, owner_id: UUID, target: RatingTarget) -> Rating | None:
        """Return the owner's rating of the target, or None."""
        ...

    @abstractmethod
    def save(self, rating: Rating) -> Rating:
        """Insert or update a rating, returning it as stored."""
        ...

    @abstractmethod
    def delete(self, rating: Rating) -> None:
        ...

    @abstractmethod
    def aggregate(self, target: RatingTarget) -> RatingAggregate:
        """Mean and count over all stored ratings of the target."""
        ...

    @abstractmethod
    def list_for_target(self, target: RatingTarget, limit: int, offset: int = 0) -> list[Rating]:
        """Ratings of the target, newest first."""
        ...
