"""
DRF exception handler mapping domain errors to HTTP responses.

Views call application services and let DomainError propagate; this
handler turns it into ``{"code": ..., "detail": ...}`` with the matching
status code. Everything else falls through to DRF's default handler.
"""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.errors import (
    BadRequestError,
    ConflictError,
    DomainError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (BadRequestError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(error: DomainError) -> int:
    for error_class, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def domain_exception_handler(exc, context):
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    status_code = status_for(exc)
    view = context.get("view")
    if status_code >= 500:
        logger.error(f"{exc} in {view.__class__.__name__}", exc_info=exc)
    else:
        logger.info(f"{exc} in {view.__class__.__name__}")

    # Internal details never leave the process
    detail = exc.message if status_code < 500 else "Internal error"
    return Response({"code": exc.code.value, "detail": detail}, status=status_code)
