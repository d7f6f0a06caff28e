"""Shared pytest fixtures for the age_calculator test suite.

Fixtures defined here are available to all test modules (unit and
integration) without any import.

No AWS credentials are required — the ``agent_runner`` fixture patches
``BedrockModel`` before any SDK initialisation can attempt a network call.
"""

import datetime
import os
import threading
from dataclasses import dataclass, field

import pytest
from unittest.mock import MagicMock, patch

# ---------------------------------------------------------------------------
# Ensure MODEL_ARN is set before any test module is collected so that
# create_agent() has a model to build against.
# ---------------------------------------------------------------------------
os.environ.setdefault("MODEL_ARN", "arn:aws:bedrock:us-east-1::foundation-model/test-model")


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_bedrock_model() -> MagicMock:
    """A MagicMock standing in for ``BedrockModel`` — no AWS credentials needed."""
    model = MagicMock()
    model.invoke.return_value = {
        "role": "assistant",
        "content": [{"type": "text", "text": "Mocked response"}],
    }
    return model


# ---------------------------------------------------------------------------
# Agent fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def agent_runner(mock_bedrock_model: MagicMock):
    """Fully constructed ``strands.Agent`` with ``BedrockModel`` patched out."""
    with patch("age_calculator.agent.BedrockModel", return_value=mock_bedrock_model):
        from age_calculator import create_agent
        return create_agent()


# ---------------------------------------------------------------------------
# Clock fixtures
# ---------------------------------------------------------------------------

@dataclass
class FakeClock:
    """Deterministic clock for countdown tests.

    Every reading advances the clock by ``step`` so a worker ticking against
    it makes progress without real time passing.
    """

    now_value: datetime.datetime
    step: datetime.timedelta = datetime.timedelta(0)
    readings: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __call__(self) -> datetime.datetime:
        with self._lock:
            value = self.now_value
            self.now_value = value + self.step
            self.readings += 1
            return value


@pytest.fixture
def fake_clock_factory():
    """Build a ``FakeClock`` starting at a given datetime."""
    def _make(start: datetime.datetime, step: datetime.timedelta = datetime.timedelta(0)) -> FakeClock:
        return FakeClock(now_value=start, step=step)
    return _make


# ---------------------------------------------------------------------------
# Date fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def known_birth_date() -> datetime.date:
    return datetime.date(1990, 5, 15)


@pytest.fixture
def leap_day_birth() -> datetime.date:
    """A valid leap-day date (2000 is divisible by 400)."""
    return datetime.date(2000, 2, 29)


@pytest.fixture
def utc() -> datetime.timezone:
    return datetime.timezone.utc
