"""age_calculator — age breakdowns and live birthday countdowns.

Public API
----------
compute
    Break the time between a birth instant and now into years/months/days
    and total weeks/days/hours/minutes/seconds.
next_occurrence, tick
    Find the next birthday and snapshot the countdown to it.
schedule_countdown, CountdownScheduler
    Run a cancellable once-per-interval countdown on a worker thread.
create_agent
    Factory function that builds and returns a configured ``strands.Agent``.

Example
-------
>>> import datetime
>>> from age_calculator import compute
>>> compute(datetime.date(2000, 2, 29), datetime.date(2001, 2, 28)).months
11
"""

from age_calculator.agent import create_agent, invoke_with_audit
from age_calculator.anniversary import (
    AnniversaryCountdown,
    CountdownRemaining,
    next_occurrence,
    tick,
)
from age_calculator.breakdown import AgeBreakdown, compute
from age_calculator.errors import InvalidRange
from age_calculator.scheduler import CancelHandle, CountdownScheduler, schedule_countdown

__all__: list[str] = [
    "AgeBreakdown",
    "AnniversaryCountdown",
    "CancelHandle",
    "CountdownRemaining",
    "CountdownScheduler",
    "InvalidRange",
    "compute",
    "create_agent",
    "invoke_with_audit",
    "next_occurrence",
    "schedule_countdown",
    "tick",
]
