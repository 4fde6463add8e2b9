"""Celery tasks for offer requests."""

from __future__ import annotations

from datetime import timedelta

from celery import shared_task  # type: ignore
from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from apps.bookings import container
from apps.bookings.application.command_handlers import TimeOutRequestsCommand


# ============================================================================
# PERIODIC TASKS (run by Celery Beat)
# ============================================================================

@shared_task(name="bookings.close_timed_out_requests")
def close_timed_out_requests() -> dict[str, int]:
    """
    Close OPEN requests the lessor never answered.

    A request is timed out once it has been OPEN for longer than
    REQUEST_OPEN_TIMEOUT_HOURS. Runs every REQUEST_TIMEOUT_SWEEP_SECONDS.

    Returns:
        dict: {"timed_out": number of closed requests}
    """
    threshold = timedelta(hours=settings.REQUEST_OPEN_TIMEOUT_HOURS)
    timed_out = container.time_out_requests_handler().handle(
        TimeOutRequestsCommand(now=timezone.now(), threshold=threshold)
    )

    return {"timed_out": len(timed_out)}
