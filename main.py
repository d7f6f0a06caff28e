"""Entry point for the age calculator CLI.

Run with:
    python main.py [--birthdate YYYY-MM-DD] [--lang en|id] [--watch] [--agent]

The script configures structured logging, reads the user's birthdate,
validates it, prints the age breakdown and the next-birthday countdown, and
optionally keeps the countdown running or hands the question to the agent.
"""

import argparse
import datetime
import json
import logging
import os
import sys
import time
import uuid

from age_calculator import (
    CountdownScheduler,
    compute,
    create_agent,
    invoke_with_audit,
    next_occurrence,
    tick,
)
from age_calculator.config import settings
from age_calculator.report import SUPPORTED_LANGUAGES, format_countdown, format_summary, labels

logger: logging.Logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure logging format based on the LOG_FORMAT environment variable.

    Set LOG_FORMAT=json for structured JSON output (CloudWatch-friendly).
    Any other value (or absent) falls back to human-readable plaintext.
    """
    log_format = os.environ.get("LOG_FORMAT", "text").lower()

    if log_format == "json":
        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload: dict = {
                    "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                }
                # Merge any extra fields passed via logger.info(..., extra={...})
                for key, value in record.__dict__.items():
                    if key not in _RECORD_ATTRS and not key.startswith("_"):
                        payload[key] = value
                return json.dumps(payload, default=str)

        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


# Attributes every LogRecord instance carries; anything else came from extra=.
_RECORD_ATTRS: frozenset[str] = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate your age and the time until your next birthday.")
    parser.add_argument("--birthdate", help="Birth date in YYYY-MM-DD format. Prompted for when omitted.")
    parser.add_argument("--lang", choices=SUPPORTED_LANGUAGES, default=None, help="Output language.")
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Keep a live countdown to the next birthday running until it arrives (Ctrl-C to stop).",
    )
    parser.add_argument(
        "--agent",
        action="store_true",
        help="Ask the Bedrock-backed agent instead of computing locally.",
    )
    return parser.parse_args(argv)


def _watch_countdown(birth: datetime.datetime, now: datetime.datetime, language: str) -> None:
    scheduler = CountdownScheduler(interval=settings.countdown_interval_seconds)

    def _on_tick(countdown) -> None:
        print(f"\r{labels(language)['next_birthday']}: {format_countdown(countdown, language)}   ", end="", flush=True)

    def _on_complete(countdown) -> None:
        print(f"\r{format_countdown(countdown, language)}", flush=True)

    handle = scheduler.schedule(birth, now, _on_tick, _on_complete)
    try:
        handle.wait()
    except KeyboardInterrupt:
        print()
    finally:
        scheduler.cancel()


def run(argv: list[str] | None = None) -> None:
    """Configure logging, read the birthdate, and print the results.

    Empty, malformed and future birthdates, and ``--agent`` without a
    configured model, print a localized message and exit with code 1 so that callers (shell scripts, Docker health checks,
    etc.) can detect failure cleanly.

    After a successful run a structured audit record is emitted via
    ``logger.info`` containing session_id, timestamp (ISO UTC), elapsed_ms,
    and the mode used.  The birthdate itself is intentionally excluded from
    the audit log to avoid retaining PII.
    """
    _configure_logging()
    args = _parse_args(argv if argv is not None else [])
    language = args.lang or settings.language
    t = labels(language)

    print(t["title"])
    birthdate_raw = (args.birthdate or input(t["birth_date_prompt"])).strip()

    if not birthdate_raw:
        print(f"Error: {t['error_no_date']}")
        sys.exit(1)

    try:
        birth_date = datetime.date.fromisoformat(birthdate_raw)
    except ValueError:
        print(f"Error: {t['error_invalid_date'].format(value=birthdate_raw)}")
        sys.exit(1)

    session_id = str(uuid.uuid4())
    start = time.monotonic()
    now = datetime.datetime.now()
    birth = datetime.datetime.combine(birth_date, datetime.time.min)

    if birth > now:
        print(f"Error: {t['error_future_date']}")
        sys.exit(1)

    if args.agent:
        prompt = (
            f"My birthdate is {birthdate_raw}. How old am I, "
            "and how many days are left until my next birthday?"
        )
        try:
            agent = create_agent()
        except ValueError:
            print(f"Error: {t['error_agent_unavailable']}")
            sys.exit(1)
        invoke_with_audit(agent, prompt, session_id=session_id)
        mode = "agent"
    else:
        breakdown = compute(birth, now)
        print(format_summary(birth, now, breakdown, language))
        countdown = tick(next_occurrence(birth, now), now)
        print(f"{t['next_birthday']}: {format_countdown(countdown, language)}")
        if args.watch and not countdown.is_today:
            _watch_countdown(birth, now, language)
        mode = "local"

    elapsed_ms = (time.monotonic() - start) * 1000
    logger.info(
        "age_calculation",
        extra={
            "session_id": session_id,
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "elapsed_ms": round(elapsed_ms, 1),
            "mode": mode,
            "language": language,
        },
    )


if __name__ == "__main__":
    run(sys.argv[1:])
