"""Due-date classification and date formatting.

Every function takes an optional ``now`` so callers (and tests) can pin the
clock; when omitted the local wall-clock time is used. Dates may be given as
``date``/``datetime`` objects or ISO-8601 strings. Missing or unparseable
values count as "no date": predicates answer ``False`` and formatters return
an empty string instead of raising.
"""
import calendar
import logging
import math
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple, Union

from ..config import DUE_SOON_DAYS
from ..constants import DueDateStatus

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str, None]

RELATIVE_UNITS = (
    ("year", 31_536_000),
    ("month", 2_592_000),
    ("week", 604_800),
    ("day", 86_400),
    ("hour", 3_600),
    ("minute", 60),
)


def _now(now: Optional[datetime] = None) -> datetime:
    return now if now is not None else datetime.now()


def _align(moment: datetime, reference: datetime) -> datetime:
    # Naive and aware datetimes can't be compared; bring moment onto
    # the reference clock.
    if moment.tzinfo is not None and reference.tzinfo is None:
        return moment.astimezone().replace(tzinfo=None)
    if moment.tzinfo is None and reference.tzinfo is not None:
        return moment.replace(tzinfo=reference.tzinfo)
    if moment.tzinfo is not None:
        return moment.astimezone(reference.tzinfo)
    return moment


def to_datetime(value: DateLike, now: Optional[datetime] = None) -> Optional[datetime]:
    """Coerce a date-like value to a datetime comparable with ``now``."""
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time.min)
    elif isinstance(value, str):
        try:
            moment = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            logger.debug("Ignoring unparseable date %r", value)
            return None
    else:
        logger.debug("Ignoring date of unsupported type %s", type(value).__name__)
        return None

    return _align(moment, _now(now))


def _calendar_date(value: DateLike, now: datetime) -> Optional[date]:
    moment = to_datetime(value, now)
    return moment.date() if moment is not None else None


def is_overdue(value: DateLike, now: Optional[datetime] = None) -> bool:
    current = _now(now)
    day = _calendar_date(value, current)
    return day is not None and day < current.date()


def is_today(value: DateLike, now: Optional[datetime] = None) -> bool:
    current = _now(now)
    return _calendar_date(value, current) == current.date()


def is_tomorrow(value: DateLike, now: Optional[datetime] = None) -> bool:
    current = _now(now)
    return _calendar_date(value, current) == current.date() + timedelta(days=1)


def is_yesterday(value: DateLike, now: Optional[datetime] = None) -> bool:
    current = _now(now)
    return _calendar_date(value, current) == current.date() - timedelta(days=1)


def is_due_soon(
    value: DateLike,
    now: Optional[datetime] = None,
    days: int = DUE_SOON_DAYS,
) -> bool:
    """True when the date falls on today or one of the next ``days`` days.

    Compared at calendar-day granularity, same as ``is_overdue``, so a task
    due late on the third day is still "soon" in the morning of today.
    """
    current = _now(now)
    day = _calendar_date(value, current)
    if day is None:
        return False
    today = current.date()
    return today <= day <= today + timedelta(days=days)


def get_due_date_status(value: DateLike, now: Optional[datetime] = None) -> DueDateStatus:
    """Classify a due date into exactly one DueDateStatus bucket."""
    current = _now(now)
    if to_datetime(value, current) is None:
        return DueDateStatus.NO_DATE
    if is_overdue(value, current):
        return DueDateStatus.OVERDUE
    if is_today(value, current):
        return DueDateStatus.TODAY
    if is_tomorrow(value, current):
        return DueDateStatus.TOMORROW
    if is_due_soon(value, current):
        return DueDateStatus.DUE_SOON
    return DueDateStatus.FUTURE


def relative_time_from_seconds(seconds: int) -> str:
    """Render a signed offset in seconds, e.g. ``-90000`` -> ``"1 day ago"``."""
    abs_diff = abs(seconds)
    for name, size in RELATIVE_UNITS:
        interval = abs_diff // size
        if interval >= 1:
            suffix = "ago" if seconds < 0 else "from now"
            plural = "s" if interval > 1 else ""
            return f"{interval} {name}{plural} {suffix}"
    return "just now"


def format_relative_time(value: DateLike, now: Optional[datetime] = None) -> str:
    current = _now(now)
    moment = to_datetime(value, current)
    if moment is None:
        return ""
    diff = math.floor((moment - current).total_seconds())
    return relative_time_from_seconds(diff)


def _short(moment: datetime, current: datetime) -> str:
    text = f"{moment:%b} {moment.day}"
    if moment.year != current.year:
        text += f", {moment.year}"
    return text


def _clock(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment:%M} {meridiem}"


def format_date(value: DateLike, style: str = "short", now: Optional[datetime] = None) -> str:
    """Format a date for display.

    Styles: ``short`` ("Oct 19", year added when not the current one),
    ``long`` ("Monday, October 19, 2026"), ``relative`` ("2 days ago"),
    ``time`` ("3:05 PM") and ``datetime`` ("Oct 19, 3:05 PM"). Any other
    style falls back to month/day/year.
    """
    if value is None or value == "":
        return ""

    current = _now(now)
    moment = to_datetime(value, current)
    if moment is None:
        return "Invalid Date"

    if style == "short":
        return _short(moment, current)
    if style == "long":
        return f"{moment:%A}, {moment:%B} {moment.day}, {moment.year}"
    if style == "relative":
        return format_relative_time(moment, current)
    if style == "time":
        return _clock(moment)
    if style == "datetime":
        return f"{_short(moment, current)}, {_clock(moment)}"
    return f"{moment.month}/{moment.day}/{moment.year}"


def format_due_label(value: DateLike, now: Optional[datetime] = None) -> str:
    """Compact label for a due date: Today, Tomorrow, Overdue or a short date."""
    current = _now(now)
    moment = to_datetime(value, current)
    if moment is None:
        return ""
    if is_today(moment, current):
        return "Today"
    if is_tomorrow(moment, current):
        return "Tomorrow"
    if is_overdue(moment, current):
        return "Overdue"
    return _short(moment, current)


def format_date_for_input(value: DateLike) -> str:
    """YYYY-MM-DD, the value format of an HTML date input."""
    moment = to_datetime(value)
    return moment.date().isoformat() if moment is not None else ""


def start_of_day(value: DateLike) -> Optional[datetime]:
    moment = to_datetime(value)
    if moment is None:
        return None
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: DateLike) -> Optional[datetime]:
    moment = to_datetime(value)
    if moment is None:
        return None
    return moment.replace(hour=23, minute=59, second=59, microsecond=999999)


def add_days(value: DateLike, days: int) -> Optional[datetime]:
    moment = to_datetime(value)
    if moment is None:
        return None
    return moment + timedelta(days=days)


def days_until(value: DateLike, now: Optional[datetime] = None) -> Optional[int]:
    """Whole calendar days from today to the date; negative once it has passed."""
    current = _now(now)
    day = _calendar_date(value, current)
    if day is None:
        return None
    return (day - current.date()).days


def is_date_in_range(value: DateLike, start: DateLike, end: DateLike) -> bool:
    moment = to_datetime(value)
    lower = to_datetime(start)
    upper = to_datetime(end)
    if moment is None or lower is None or upper is None:
        return False
    return lower <= moment <= upper


def current_week_range(now: Optional[datetime] = None) -> Tuple[date, date]:
    """Sunday through Saturday of the current week."""
    today = _now(now).date()
    start = today - timedelta(days=(today.weekday() + 1) % 7)
    return start, start + timedelta(days=6)


def current_month_range(now: Optional[datetime] = None) -> Tuple[date, date]:
    today = _now(now).date()
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)
