from datetime import datetime
import time

import pytz

UTC = pytz.UTC
LOCAL_TZ = pytz.timezone("Asia/Kolkata")


def now_local():
    return datetime.now(UTC).astimezone(LOCAL_TZ)


def epoch_ms():
    """Current time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)


def display_date(moment=None):
    """
    Date the way the website shows it: day/month/year, no zero padding,
    in Indian Standard Time (e.g. 18/10/2026).
    """
    moment = moment or now_local()
    return f"{moment.day}/{moment.month}/{moment.year}"


def display_datetime(moment):
    """
    Date and 12-hour time in Indian Standard Time, e.g. 18/10/2026, 3:05:09 pm.
    Naive datetimes are treated as UTC.
    """
    if moment.tzinfo is None:
        moment = UTC.localize(moment)
    local = moment.astimezone(LOCAL_TZ)
    hour = local.hour % 12 or 12
    suffix = "am" if local.hour < 12 else "pm"
    return f"{display_date(local)}, {hour}:{local.minute:02d}:{local.second:02d} {suffix}"


def utc_iso():
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(UTC).isoformat()


def parse_iso(value):
    """Parse GitHub-style timestamps such as 2026-10-18T09:30:00Z."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
