"""Calendar and absolute age arithmetic.

``compute`` turns a (birth, now) pair into years/months/days plus truncated
totals in weeks, days, hours, minutes and seconds.  Day borrowing uses the
length of the month before ``now``'s month, not the birth month.
"""

import calendar
import datetime
import logging
from dataclasses import asdict, dataclass

from age_calculator.errors import InvalidRange

logger: logging.Logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
SECONDS_PER_DAY = SECONDS_PER_MINUTE * MINUTES_PER_HOUR * HOURS_PER_DAY


@dataclass(frozen=True)
class AgeBreakdown:
    """Elapsed age split into calendar units and absolute totals."""

    years: int
    months: int
    days: int
    total_weeks: int
    total_days: int
    total_hours: int
    total_minutes: int
    total_seconds: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def as_datetime(value: datetime.date, other: datetime.date) -> datetime.datetime:
    """Promote ``value`` to a datetime comparable with ``other``.

    A bare ``date`` becomes midnight of that day and borrows the tzinfo of
    ``other`` when ``other`` is a datetime.  Datetimes are returned unchanged.
    """
    if isinstance(value, datetime.datetime):
        return value
    tzinfo = other.tzinfo if isinstance(other, datetime.datetime) else None
    return datetime.datetime.combine(value, datetime.time.min, tzinfo=tzinfo)


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year`` (Gregorian, leap-aware)."""
    return calendar.monthrange(year, month)[1]


def _previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def _calendar_delta(
    birth: datetime.datetime, now: datetime.datetime
) -> tuple[int, int, int]:
    years = now.year - birth.year
    months = now.month - birth.month
    days = now.day - birth.day

    borrow_year, borrow_month = now.year, now.month
    while days < 0:
        # A second borrow only happens when birth.day exceeds the length of
        # the month before now (e.g. the 31st against February).
        borrow_year, borrow_month = _previous_month(borrow_year, borrow_month)
        months -= 1
        days += days_in_month(borrow_year, borrow_month)

    while months < 0:
        years -= 1
        months += 12

    return years, months, days


def compute(birth: datetime.date, now: datetime.date) -> AgeBreakdown:
    """Compute the age breakdown of ``birth`` measured at ``now``.

    Args:
        birth: The birth instant (``date`` or ``datetime``).
        now: The instant to measure at.  Must not be earlier than ``birth``.

    Returns:
        A new ``AgeBreakdown``.  Totals are floor divisions of the exact
        elapsed seconds; a birth 23h59m ago yields ``total_hours == 23`` and
        ``total_days == 0``.

    Raises:
        InvalidRange: If ``birth`` is after ``now``.
    """
    birth_dt = as_datetime(birth, now)
    now_dt = as_datetime(now, birth)

    if birth_dt > now_dt:
        raise InvalidRange(birth, now)

    years, months, days = _calendar_delta(birth_dt, now_dt)

    elapsed = now_dt - birth_dt
    # timedelta normalises to non-negative seconds/microseconds, so dropping
    # microseconds is a floor.
    total_seconds = elapsed.days * SECONDS_PER_DAY + elapsed.seconds
    total_minutes = total_seconds // SECONDS_PER_MINUTE
    total_hours = total_minutes // MINUTES_PER_HOUR
    total_days = total_hours // HOURS_PER_DAY
    total_weeks = total_days // DAYS_PER_WEEK

    result = AgeBreakdown(
        years=years,
        months=months,
        days=days,
        total_weeks=total_weeks,
        total_days=total_days,
        total_hours=total_hours,
        total_minutes=total_minutes,
        total_seconds=total_seconds,
    )
    logger.debug("compute result: %s", result)
    return result
