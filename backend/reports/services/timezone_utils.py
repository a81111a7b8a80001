"""
Timezone utilities for reports.
"""
import logging
from datetime import date, datetime, time, timedelta
from typing import Tuple

import pytz
from django.conf import settings

logger = logging.getLogger(__name__)


class TimezoneUtils:
    """Utilities for handling timezone-aware date operations in reports."""

    @staticmethod
    def get_local_timezone():
        """The display timezone sales are reported in (settings.TIME_ZONE)."""
        try:
            return pytz.timezone(settings.TIME_ZONE)
        except pytz.UnknownTimeZoneError:
            logger.warning(f"Unknown TIME_ZONE '{settings.TIME_ZONE}', falling back to UTC")
            return pytz.UTC

    @staticmethod
    def day_bounds(report_date: date, tz=None) -> Tuple[datetime, datetime]:
        """
        [start, end) of a calendar day in the local timezone, as aware datetimes.
        DST-safe: each boundary is localized on its own.
        """
        tz = tz or TimezoneUtils.get_local_timezone()
        start = tz.localize(datetime.combine(report_date, time.min))
        end = tz.localize(datetime.combine(report_date + timedelta(days=1), time.min))
        return start, end

    @staticmethod
    def to_local(value: datetime, tz=None) -> datetime:
        """Convert an aware datetime to the local timezone."""
        tz = tz or TimezoneUtils.get_local_timezone()
        if value.tzinfo is None:
            value = pytz.UTC.localize(value)
        return value.astimezone(tz)

    @staticmethod
    def local_today(tz=None) -> date:
        tz = tz or TimezoneUtils.get_local_timezone()
        return datetime.now(tz).date()
