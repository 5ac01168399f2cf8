"""Shared fixtures and reusable recording actions for stepper tests."""

from __future__ import annotations

from typing import Any

import pytest

from stepper import IdGenerator, Stepper, StepperConfig

# ---------------------------------------------------------------------------
# Reusable step actions
# ---------------------------------------------------------------------------


class Recorder:
    """Step action that appends ``(name, payload, is_last)`` to a shared log.

    With ``advance=True`` it calls ``context.next(payload)`` unless it is the
    last step, so a whole stepper or chain runs from a single ``start``.
    """

    def __init__(self, name: str, log: list, advance: bool = False) -> None:
        self.__name__ = name
        self.log = log
        self.advance = advance

    def __call__(self, context: Any, payload: Any, is_last: bool) -> None:
        self.log.append((self.__name__, payload, is_last))
        if self.advance and not is_last:
            context.next(payload)


class Parked:
    """Step action that stores its context instead of advancing.

    Models a step waiting on an external event; the test resumes it later
    with ``parked.pending.pop().next(...)``.
    """

    def __init__(self, name: str, log: list) -> None:
        self.__name__ = name
        self.log = log
        self.pending: list = []

    def __call__(self, context: Any, payload: Any, is_last: bool) -> None:
        self.log.append((self.__name__, payload, is_last))
        self.pending.append(context)


def names(log: list) -> list[str]:
    return [entry[0] for entry in log]


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def ids():
    """A private id source so ids are predictable within one test."""
    return IdGenerator()


@pytest.fixture
def config(ids):
    return StepperConfig(id_generator=ids)


@pytest.fixture
def make_steps(call_log):
    """Build *n* recorders named s0..s{n-1} sharing ``call_log``."""

    def _make(n: int, advance: bool = False) -> list[Recorder]:
        return [Recorder(f"s{i}", call_log, advance=advance) for i in range(n)]

    return _make


@pytest.fixture
def rejected():
    return []


@pytest.fixture
def three(make_steps, rejected, config):
    """Unstarted three-step stepper with recording rejection handler."""
    return Stepper(make_steps(3), on_reject=rejected.append, config=config)
