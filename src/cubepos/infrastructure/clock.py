"""Business-calendar "today".

Lease statuses flip at midnight in the shop's own time zone, not at
UTC midnight, so "today" is always taken in the configured zone.
"""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Australia/Sydney"


def business_today(tz_name: str = DEFAULT_TIMEZONE) -> date:
    return datetime.now(ZoneInfo(tz_name)).date()
