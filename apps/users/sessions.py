"""Extract session credentials from incoming HTTP requests."""

from __future__ import annotations

from uuid import UUID

from apps.users.domain import ActorSession

SESSION_HEADER = "HTTP_X_SESSION_ID"
USER_HEADER = "HTTP_X_USER_ID"
SESSION_COOKIE = "session_id"
USER_COOKIE = "user_id"


def session_from_request(request) -> ActorSession | None:  # type: ignore
    """
    Read ``X-Session-Id``/``X-User-Id`` headers, falling back to the
    ``session_id``/``user_id`` cookies. Returns None when either part is
    missing or the user id is not a UUID; validation is left to the
    SessionValidator.
    """
    session_id = request.META.get(SESSION_HEADER) or request.COOKIES.get(SESSION_COOKIE)
    raw_user_id = request.META.get(USER_HEADER) or request.COOKIES.get(USER_COOKIE)
    if not session_id or not raw_user_id:
        return None
    try:
        user_id = UUID(str(raw_user_id))
    except ValueError:
        return None
    return ActorSession(session_id=session_id, user_id=user_id)
