import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("rental_marketplace")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


# ============================================================================
# CELERY BEAT SCHEDULE (Periodic Tasks)
# ============================================================================

app.conf.beat_schedule = {
    # Close requests the lessor never answered, every two hours by default
    "close-timed-out-requests": {
        "task": "bookings.close_timed_out_requests",
        "schedule": float(os.environ.get("REQUEST_TIMEOUT_SWEEP_SECONDS", 7200)),
    },
}
