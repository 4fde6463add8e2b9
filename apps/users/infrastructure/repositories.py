"""Django ORM implementations of the users collaborators."""

from __future__ import annotations

import logging
from uuid import UUID

from apps.users.domain import ActorIdentity, ActorSession, RatingRole, SessionValidator, UserRepository
from apps.users.models import CustomUser, UserSession
from shared.domain.errors import UnauthorizedError
from shared.domain.value_objects import RatingAggregate
from shared.infrastructure.locking import lock_queryset_if_possible

logger = logging.getLogger(__name__)


def to_identity(user: CustomUser) -> ActorIdentity:
    return ActorIdentity(
        user_id=user.id,
        email=user.email,
        lessor_rating=RatingAggregate(user.lessor_rating, user.number_of_lessor_ratings),
        lessee_rating=RatingAggregate(user.lessee_rating, user.number_of_lessee_ratings),
    )


class DjangoSessionValidator(SessionValidator):
    """Validates sessions against the UserSession table."""

    def validate(self, session: ActorSession | None) -> ActorIdentity:
        if session is None or not session.session_id or not session.user_id:
            raise UnauthorizedError("Session credentials are missing")

        user_session = (
            UserSession.objects.active()
            .select_related("user")
            .filter(session_id=session.session_id, user_id=session.user_id, user__is_active=True)
            .first()
        )
        if user_session is None:
            logger.info(f"Rejected session for user {session.user_id}")
            raise UnauthorizedError("Session is invalid or expired")

        return to_identity(user_session.user)


class DjangoUserRepository(UserRepository):
    def get(self, user_id: UUID, lock: bool = False) -> ActorIdentity | None:
        queryset = CustomUser.objects.filter(id=user_id, is_active=True)
        if lock:
            queryset = lock_queryset_if_possible(queryset)
        user = queryset.first()
        return to_identity(user) if user else None

    def save_rating(self, user_id: UUID, role: RatingRole, aggregate: RatingAggregate) -> None:
        if role is RatingRole.LESSOR:
            fields = {"lessor_rating": aggregate.mean, "number_of_lessor_ratings": aggregate.count}
        else:
            fields = {"lessee_rating": aggregate.mean, "number_of_lessee_ratings": aggregate.count}
        CustomUser.objects.filter(id=user_id).update(**fields)
