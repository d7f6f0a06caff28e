"""Next-birthday lookup and countdown snapshots.

Both functions are pure: the live refresh loop lives in
``age_calculator.scheduler`` and calls ``tick`` once per interval.

Feb 29 birthdays fall on Feb 28 in non-leap years.
"""

import calendar
import datetime
import logging
from dataclasses import dataclass

from age_calculator.breakdown import (
    MINUTES_PER_HOUR,
    SECONDS_PER_DAY,
    SECONDS_PER_MINUTE,
    as_datetime,
)

logger: logging.Logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR


@dataclass(frozen=True)
class CountdownRemaining:
    days: int
    hours: int
    minutes: int
    seconds: int


@dataclass(frozen=True)
class AnniversaryCountdown:
    """Snapshot of the time left until ``next_occurrence``.

    ``is_today`` is set once the whole-second difference reaches zero; the
    remaining fields are then all zero.
    """

    next_occurrence: datetime.datetime
    remaining: CountdownRemaining
    is_today: bool


def anniversary_in(year: int, birth: datetime.date, tzinfo=None) -> datetime.datetime:
    """Midnight of the birth month/day in ``year``, clamping Feb 29 to Feb 28."""
    day = birth.day
    if birth.month == 2 and day == 29 and not calendar.isleap(year):
        day = 28
    return datetime.datetime(year, birth.month, day, tzinfo=tzinfo)


def next_occurrence(birth: datetime.date, now: datetime.date) -> datetime.datetime:
    """Return the next birthday of ``birth`` at or after ``now``.

    The candidate is midnight on the birth month/day in ``now``'s year, in
    ``now``'s timezone.  A candidate strictly before ``now`` moves to the
    following year, so calling this at exactly midnight on the birthday
    returns that same midnight.
    """
    now_dt = as_datetime(now, birth)
    candidate = anniversary_in(now_dt.year, birth, now_dt.tzinfo)
    if candidate < now_dt:
        candidate = anniversary_in(now_dt.year + 1, birth, now_dt.tzinfo)
    logger.debug("next_occurrence resolved to %s", candidate.isoformat())
    return candidate


def tick(occurrence: datetime.datetime, now: datetime.datetime) -> AnniversaryCountdown:
    """Build the countdown from ``now`` to ``occurrence``.

    Never raises for comparable inputs.  Sub-second remainders are truncated,
    so half a second before the birthday already reports ``is_today``.
    """
    diff = occurrence - now
    total_seconds = diff.days * SECONDS_PER_DAY + diff.seconds

    if total_seconds <= 0:
        return AnniversaryCountdown(
            next_occurrence=occurrence,
            remaining=CountdownRemaining(days=0, hours=0, minutes=0, seconds=0),
            is_today=True,
        )

    days, rest = divmod(total_seconds, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    return AnniversaryCountdown(
        next_occurrence=occurrence,
        remaining=CountdownRemaining(days=days, hours=hours, minutes=minutes, seconds=seconds),
        is_today=False,
    )
