"""StepHandle — one step action bound to its owning Stepper."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .protocol import StepAction, action_name

if TYPE_CHECKING:
    from .stepper import Stepper


class StepHandle:
    """Identity-bearing wrapper around a single step action.

    The owning ``Stepper`` holds the handle in its step list; ``stepper`` is
    only a back-reference.  Every navigation method re-resolves this handle
    through ``Stepper.index()`` by ``id``, so a handle that has been removed
    raises ``HandleNotFound`` instead of acting on a stale position.

    A handle is also the navigation context passed to its own action::

        def approve(step, payload, is_last):
            if payload["ok"]:
                step.next(payload)
            else:
                step.reject(payload)
    """

    def __init__(self, action: StepAction, stepper: "Stepper", step_id: int) -> None:
        self.id = step_id
        self.action = action
        self.stepper = stepper

    @property
    def name(self) -> str:
        return action_name(self.action)

    def __repr__(self) -> str:
        return f"StepHandle(id={self.id}, name={self.name!r})"

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(self, payload: Any, is_last: bool) -> Any:
        """Invoke the wrapped action with this handle as its context."""
        return self.action(self, payload, is_last)

    # ------------------------------------------------------------------
    # Navigation (delegates to the owning Stepper)
    # ------------------------------------------------------------------

    def next(self, payload: Any = None) -> None:
        """Dispatch the step following this one."""
        self.stepper.next(payload, self)

    def prev(self, distance: int = 1) -> "StepHandle":
        """Move the cursor *distance* steps back from this one.  Does not execute."""
        return self.stepper.prev(distance, self)

    def remove(self) -> None:
        self.stepper.remove(self)

    def reject(self, payload: Any = None) -> Any:
        """Hand *payload* to the stepper's rejection handler.

        Cursor and step list are left untouched.
        """
        self.stepper.index(self)
        return self.stepper.reject(payload)

    def insert_after(self, action: StepAction) -> "StepHandle":
        return self.stepper.insert_after(self, action)

    def insert_before(self, action: StepAction) -> "StepHandle":
        return self.stepper.insert_before(self, action)

    advance = next
    rewind = prev
    detach = remove
