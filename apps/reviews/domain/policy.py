"""
Rating Policy

Input validation and eligibility rules, checked in this order by the
rating service:

1. score is an integer in (RATING_MIN, RATING_MAX]
2. a text needs a headline, both at most RATING_TEXT_MAX_LENGTH characters
3. the actor's session is valid (service)
4. the actor is eligible to rate the target
5. the actor has not rated the target yet (service)
"""

from uuid import UUID

from apps.bookings.domain import RequestRepository
from apps.offers.domain import Offer
from apps.reviews.domain.entities import RATING_MAX, RATING_MIN, RATING_TEXT_MAX_LENGTH, RatingTarget
from apps.users.domain import RatingRole
from shared.domain.errors import BadRequestError, ForbiddenError


def validate_rating_input(value, headline: str | None, text: str | None) -> tuple[int, str, str]:
    """
    Check score and texts, returning them normalized.

    Raises:
        BadRequestError: On a non-integer or out of range score, a text
            without headline, or an overlong headline or text
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadRequestError("Rating must be an integer")
    if value <= RATING_MIN or value > RATING_MAX:
        raise BadRequestError(f"Rating must be greater than {RATING_MIN} and at most {RATING_MAX}")

    headline = (headline or '').strip()
    text = (text or '').strip()
    if text and not headline:
        raise BadRequestError("A rating text needs a headline")
    if len(headline) > RATING_TEXT_MAX_LENGTH or len(text) > RATING_TEXT_MAX_LENGTH:
        raise BadRequestError(f"Headline and text are limited to {RATING_TEXT_MAX_LENGTH} characters")

    return value, headline, text


class RatingEligibility:
    """Who may rate what, based on the request history between the parties"""

    def __init__(self, requests: RequestRepository):
        self.requests = requests

    def ensure_can_rate_offer(self, actor_id: UUID, offer: Offer) -> None:
        if offer.is_owned_by(actor_id):
            raise ForbiddenError("Lessors cannot rate their own offer")
        if not self.requests.exists_for_offer(actor_id, offer.id):
            raise ForbiddenError("Only users who requested this offer can rate it")

    def ensure_can_rate_user(self, actor_id: UUID, target: RatingTarget) -> None:
        rated_id = target.target_id
        if rated_id == actor_id:
            raise ForbiddenError("Users cannot rate themselves")

        if target.role is RatingRole.LESSOR:
            # The actor rented from the rated user
            eligible = self.requests.exists_between(lessee_id=actor_id, lessor_id=rated_id)
        else:
            # The rated user rented from the actor
            eligible = self.requests.exists_between(lessee_id=rated_id, lessor_id=actor_id)

        if not eligible:
            raise ForbiddenError(f"No request links you to this {target.role.value}")
