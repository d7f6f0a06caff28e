"""Strands tools that expose the age arithmetic to the agent.

Each function is decorated with ``@tool`` so the Strands framework can
expose it to the language model.  Input validation is performed before any
computation so that the model receives a clear error message rather than a
cryptic Python traceback.
"""

import datetime
import logging

from strands import tool

from age_calculator.anniversary import next_occurrence, tick
from age_calculator.breakdown import compute

logger: logging.Logger = logging.getLogger(__name__)

_MAX_DATE_LEN = 10
_MIN_DATE = datetime.date(1900, 1, 1)
_MAX_DATE = datetime.date(2100, 12, 31)


def _parse_date(name: str, value: str) -> datetime.date:
    # type, length, and range validation before any parsing
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string.")
    if len(value) > _MAX_DATE_LEN:
        raise ValueError(f"{name} exceeds maximum length of {_MAX_DATE_LEN}.")

    try:
        parsed = datetime.date.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(f"{name} is not a valid ISO date (YYYY-MM-DD).") from exc

    if not (_MIN_DATE <= parsed <= _MAX_DATE):
        raise ValueError(f"{name} is outside the allowed range (1900-01-01 to 2100-12-31).")
    return parsed


def _parse_range(birth_date: str, as_of_date: str) -> tuple[datetime.date, datetime.date]:
    birth = _parse_date("birth_date", birth_date)
    as_of = _parse_date("as_of_date", as_of_date)
    if birth > as_of:
        raise ValueError(
            f"birth_date ({birth_date}) must not be after as_of_date ({as_of_date})."
        )
    return birth, as_of


@tool
def get_current_date() -> str:
    """Get today's date in YYYY-MM-DD format.

    Use this tool to retrieve the current date when you need to calculate
    someone's age or the time left until their next birthday.

    Returns:
        Today's date as a string in YYYY-MM-DD format.
    """
    today = datetime.date.today().isoformat()
    logger.debug("get_current_date called, returning %s", today)
    return today


@tool
def calculate_age(birth_date: str, as_of_date: str) -> dict:
    """Calculate a person's age on a given date.

    Use this tool to break an age down into years, months and days, and to
    get the total number of weeks, days, hours, minutes and seconds lived
    between a birthdate and a reference date (usually today's date).

    Args:
        birth_date: The birthdate in YYYY-MM-DD format.
        as_of_date: The date to measure the age at, in YYYY-MM-DD format.
            Must not be earlier than birth_date.

    Returns:
        A dict with the keys years, months, days, total_weeks, total_days,
        total_hours, total_minutes and total_seconds, all non-negative
        integers.

    Raises:
        ValueError: If either date is not in YYYY-MM-DD format, is outside
            1900-01-01 to 2100-12-31, or if birth_date is after as_of_date.
    """
    # log input lengths, not raw values
    logger.debug(
        "calculate_age called with %d-char birth_date, %d-char as_of_date",
        len(birth_date) if isinstance(birth_date, str) else -1,
        len(as_of_date) if isinstance(as_of_date, str) else -1,
    )
    birth, as_of = _parse_range(birth_date, as_of_date)
    return compute(birth, as_of).as_dict()


@tool
def calculate_next_birthday(birth_date: str, as_of_date: str) -> dict:
    """Calculate when the next birthday falls and how many days remain.

    Use this tool when the user asks how long it is until their next
    birthday.  A birthday on as_of_date itself counts as today.  People born
    on February 29 celebrate on February 28 in non-leap years.

    Args:
        birth_date: The birthdate in YYYY-MM-DD format.
        as_of_date: The date to count from, in YYYY-MM-DD format.  Must not
            be earlier than birth_date.

    Returns:
        A dict with next_birthday (YYYY-MM-DD), days_remaining (integer) and
        is_today (boolean).

    Raises:
        ValueError: If either date is not in YYYY-MM-DD format, is outside
            1900-01-01 to 2100-12-31, or if birth_date is after as_of_date.
    """
    birth, as_of = _parse_range(birth_date, as_of_date)
    occurrence = next_occurrence(birth, as_of)
    countdown = tick(occurrence, datetime.datetime.combine(as_of, datetime.time.min))
    result = {
        "next_birthday": occurrence.date().isoformat(),
        "days_remaining": countdown.remaining.days,
        "is_today": countdown.is_today,
    }
    logger.debug("calculate_next_birthday result: %s", result)
    return result
