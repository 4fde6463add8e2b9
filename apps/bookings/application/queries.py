"""
Read side of the booking orchestrator.

Reading a single request clears the reader's "has update" flag; listing
only reports it.
"""

from dataclasses import dataclass
from typing import Callable
from uuid import UUID
import logging

from apps.bookings.domain import ActorRole, OfferRequest, RequestFilters, RequestRepository
from apps.users.domain import ActorSession, SessionValidator
from shared.application.uow import AbstractUnitOfWork
from shared.domain.errors import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestView:
    """A request as one of its parties sees it"""
    request: OfferRequest
    role: ActorRole
    has_update: bool
    qr_code: str | None = None


class GetRequestHandler:
    def __init__(
        self,
        sessions: SessionValidator,
        requests: RequestRepository,
        uow: Callable[[], AbstractUnitOfWork],
    ):
        self.sessions = sessions
        self.requests = requests
        self.uow = uow

    def handle(self, session: ActorSession | None, request_id: UUID) -> RequestView:
        """
        Return the request for one of its parties and mark it seen.

        The QR code is included only for the party that has to show it.
        """
        actor = self.sessions.validate(session)

        with self.uow():
            request = self.requests.get(request_id, lock=True)
            if request is None:
                raise NotFoundError("Request", request_id)

            role = request.role_of(actor.user_id)
            if role is None:
                raise ForbiddenError("Only the lessor and the lessee can read this request")

            had_update = request.has_update_for(role)
            if had_update:
                self.requests.save(request.mark_seen(role))

        return RequestView(
            request=request.sanitized(),
            role=role,
            has_update=had_update,
            qr_code=request.visible_qr_code(role),
        )


class ListRequestsHandler:
    def __init__(self, sessions: SessionValidator, requests: RequestRepository):
        self.sessions = sessions
        self.requests = requests

    def handle(self, session: ActorSession | None, filters: RequestFilters) -> list[RequestView]:
        actor = self.sessions.validate(session)
        views = []
        for request in self.requests.list_by_user(actor.user_id, filters):
            role = request.role_of(actor.user_id)
            views.append(RequestView(
                request=request.sanitized(),
                role=role,
                has_update=request.has_update_for(role),
            ))
        return views
