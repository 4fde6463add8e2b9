from apps.reviews.domain.entities import (
    RATING_MAX,
    RATING_MIN,
    RATING_TEXT_MAX_LENGTH,
    Rating,
    RatingTarget,
    TargetKind,
)
from apps.reviews.domain.policy import RatingEligibility, validate_rating_input
from apps.reviews.domain.repositories import RatingRepository

__all__ = [
    "RATING_MAX",
    "RATING_MIN",
    "RATING_TEXT_MAX_LENGTH",
    "Rating",
    "RatingEligibility",
    "RatingRepository",
    "RatingTarget",
    "TargetKind",
    "validate_rating_input",
]
