"""Countdown to an event, as shown on the event landing page."""

from datetime import datetime
from typing import Optional

from django.utils import timezone

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR


def calculate_countdown(target: datetime, now: Optional[datetime] = None) -> dict:
    """
    Break the time left until ``target`` into days/hours/minutes/seconds.

    Once the target is reached everything is zero and ``is_expired`` is True.
    """
    now = now or timezone.now()
    total_seconds = int((target - now).total_seconds())

    if total_seconds <= 0:
        return {'days': 0, 'hours': 0, 'minutes': 0, 'seconds': 0, 'is_expired': True}

    days, rest = divmod(total_seconds, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)

    return {
        'days': days,
        'hours': hours,
        'minutes': minutes,
        'seconds': seconds,
        'is_expired': False,
    }
