"""Structural protocol and arity check for step actions."""

from __future__ import annotations

import inspect
from typing import Any, Protocol, runtime_checkable

from .errors import StepSignatureError


@runtime_checkable
class StepAction(Protocol):
    """Anything callable as ``action(context, payload, is_last)``.

    ``context`` is a ``StepHandle`` when driven by a ``Stepper`` and a
    ``ChainContext`` when driven by a compiled ``sequence``.  The return
    value is ignored; the action moves the pipeline on by calling
    ``context.next()`` (now or later) or ``context.reject()``.
    """

    def __call__(self, context: Any, payload: Any, is_last: bool) -> Any: ...


def check_step_arity(action: object) -> None:
    """Raise ``StepSignatureError`` unless *action* accepts three positional args.

    Only arity is checked.  Callables without an introspectable signature
    (some builtins and C extensions) are accepted as-is.
    """
    if not callable(action):
        raise StepSignatureError(
            f"Step action must be callable, got {type(action).__name__}."
        )
    try:
        signature = inspect.signature(action)
    except (TypeError, ValueError):
        return
    try:
        signature.bind(None, None, None)
    except TypeError as exc:
        raise StepSignatureError(
            f"Step action {action_name(action)} must accept "
            f"(context, payload, is_last): {exc}"
        ) from exc


def action_name(action: object) -> str:
    """Human-readable name for *action*, used in logs and snapshots."""
    name = getattr(action, "__name__", None)
    if isinstance(name, str):
        return name
    return type(action).__name__
