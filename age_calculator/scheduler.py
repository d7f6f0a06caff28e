"""Live birthday countdown driven by a background worker thread.

``schedule_countdown`` starts a daemon thread that re-derives the countdown
from ``(next_occurrence, clock())`` on every tick, so a late or missed tick
corrects itself on the next one.  ``CountdownScheduler`` owns at most one
running countdown per session and cancels the previous one before starting
a replacement.
"""

import datetime
import logging
import threading
from typing import Callable

from age_calculator.anniversary import AnniversaryCountdown, next_occurrence, tick

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS: float = 1.0

CountdownCallback = Callable[[AnniversaryCountdown], None]
Clock = Callable[[], datetime.datetime]


def system_clock_for(now: datetime.date) -> Clock:
    """Return a wall clock whose readings can be compared with ``now``."""
    tzinfo = now.tzinfo if isinstance(now, datetime.datetime) else None

    def _clock() -> datetime.datetime:
        return datetime.datetime.now(tzinfo)

    return _clock


class CancelHandle:
    """Handle to one running countdown.

    Once ``cancel()`` returns, neither callback of this handle fires again.
    """

    def __init__(
        self,
        occurrence: datetime.datetime,
        on_tick: CountdownCallback,
        on_complete: CountdownCallback,
        clock: Clock,
        interval: float,
    ) -> None:
        self.next_occurrence = occurrence
        self._on_tick = on_tick
        self._on_complete = on_complete
        self._clock = clock
        self._interval = interval
        self._stop = threading.Event()
        self._finished = threading.Event()
        self._lock = threading.RLock()
        self._thread = threading.Thread(
            target=self._run, name="birthday-countdown", daemon=True
        )

    def start(self) -> "CancelHandle":
        self._thread.start()
        return self

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set()

    @property
    def done(self) -> bool:
        """True once the worker has exited, whether completed or cancelled."""
        return self._finished.is_set()

    def cancel(self) -> None:
        """Stop the countdown.  Safe to call repeatedly and from a callback."""
        with self._lock:
            self._stop.set()
        if self._thread.is_alive() and threading.current_thread() is not self._thread:
            self._thread.join()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the worker exits.  Returns False on timeout."""
        return self._finished.wait(timeout)

    def _emit(self, callback: CountdownCallback, countdown: AnniversaryCountdown) -> bool:
        # Holding the lock keeps cancel() from returning mid-callback.
        with self._lock:
            if self._stop.is_set():
                return False
            callback(countdown)
            return True

    def _run(self) -> None:
        try:
            while not self._stop.is_set():
                countdown = tick(self.next_occurrence, self._clock())
                if countdown.is_today:
                    if self._emit(self._on_complete, countdown):
                        logger.info("Birthday countdown complete")
                    self._stop.set()
                    break
                self._emit(self._on_tick, countdown)
                self._stop.wait(self._interval)
        except Exception:
            logger.exception("Birthday countdown stopped by callback error")
            self._stop.set()
        finally:
            self._finished.set()


def schedule_countdown(
    birth: datetime.date,
    now: datetime.date,
    on_tick: CountdownCallback,
    on_complete: CountdownCallback,
    *,
    interval: float = DEFAULT_INTERVAL_SECONDS,
    clock: Clock | None = None,
    previous: CancelHandle | None = None,
) -> CancelHandle:
    """Start a live countdown to the next birthday after ``now``.

    The first tick runs immediately on the worker thread, then once every
    ``interval`` seconds until the birthday arrives (``on_complete`` is
    called once with the terminal countdown) or the handle is cancelled.

    Args:
        birth: Birth date or datetime.
        now: The instant the calculation was made; fixes the target birthday.
        on_tick: Receives every non-terminal countdown.
        on_complete: Receives the countdown with ``is_today`` set.
        interval: Seconds between ticks.  Must be positive.
        clock: Zero-argument callable returning the current time.  Defaults
            to the system clock in ``now``'s timezone.
        previous: A handle to cancel before the new worker starts.

    Returns:
        The ``CancelHandle`` of the new countdown.

    Raises:
        ValueError: If ``interval`` is not positive.
    """
    if interval <= 0:
        raise ValueError("interval must be positive.")

    if previous is not None:
        previous.cancel()

    occurrence = next_occurrence(birth, now)
    handle = CancelHandle(
        occurrence,
        on_tick=on_tick,
        on_complete=on_complete,
        clock=clock or system_clock_for(now),
        interval=interval,
    )
    logger.debug("Starting birthday countdown to %s", occurrence.isoformat())
    return handle.start()


class CountdownScheduler:
    """Keeps a single countdown running for one calculation session."""

    def __init__(
        self,
        interval: float = DEFAULT_INTERVAL_SECONDS,
        clock: Clock | None = None,
    ) -> None:
        self.interval = interval
        self.clock = clock
        self.active: CancelHandle | None = None

    def schedule(
        self,
        birth: datetime.date,
        now: datetime.date,
        on_tick: CountdownCallback,
        on_complete: CountdownCallback,
    ) -> CancelHandle:
        """Cancel the running countdown, if any, and start a new one."""
        self.active = schedule_countdown(
            birth,
            now,
            on_tick,
            on_complete,
            interval=self.interval,
            clock=self.clock,
            previous=self.active,
        )
        return self.active

    def cancel(self) -> None:
        if self.active is not None:
            self.active.cancel()
            self.active = None
