import os
from pathlib import Path

from celery import Celery
from celery.schedules import crontab  # type: ignore
from dotenv import load_dotenv

# The beat schedule reads the environment before Django settings are loaded.
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("hotel_booking")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


# ============================================================================
# CELERY BEAT SCHEDULE (Periodic Tasks)
# ============================================================================

app.conf.beat_schedule = {
    # Release PENDING holds whose check-in date has passed, once a day
    "expire-stale-pending-bookings": {
        "task": "bookings.expire_stale_pending_bookings",
        "schedule": crontab(
            minute=0,
            hour=int(os.environ.get("BOOKINGS_EXPIRY_SWEEP_HOUR", "3")),
        ),
    },
}
