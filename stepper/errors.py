"""Stepper error types."""

from __future__ import annotations

from typing import Any


class StepperError(Exception):
    """Base class for every error raised by the stepper package."""


class SequenceExhausted(StepperError):
    """``next`` was called when no further step exists.

    Reaching the last step is a valid state; only a further ``next`` fails.
    """


class NavigationOutOfRange(StepperError, IndexError):
    """``prev`` asked for a position outside the step list."""


class HandleNotFound(StepperError, LookupError):
    """A handle could not be located in the stepper's step list.

    Raised when the handle was removed, or belongs to another stepper.
    """

    def __init__(self, handle: Any) -> None:
        self.handle = handle
        super().__init__(f"Cannot find step {handle!r} in steps list")


class StepSignatureError(StepperError, TypeError):
    """A step action cannot be called as ``action(context, payload, is_last)``."""
