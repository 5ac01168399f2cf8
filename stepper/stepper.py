"""Stepper — editable, navigable sequence of step actions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

from .config import StepperConfig
from .errors import HandleNotFound, NavigationOutOfRange, SequenceExhausted
from .handle import StepHandle
from .protocol import StepAction, check_step_arity
from .sequence import Chain, sequence
from .snapshot import StepInfo, StepperSnapshot

logger = logging.getLogger(__name__)


def _noop_reject(payload: Any = None) -> None:
    return None


class Stepper:
    """Ordered list of step handles driven one at a time.

    Each action is called as ``action(handle, payload, is_last)`` and decides
    what happens next by calling methods on ``handle``::

        def collect(step, form, is_last):
            form["name"] = "Ada"
            step.next(form)

        def confirm(step, form, is_last):
            if not form.get("name"):
                step.reject(form)

        stepper = Stepper([collect, confirm], on_reject=print)
        stepper.start({})

    The cursor is kept as a reference to the current handle and its position
    is looked up on every navigation call, so inserts, removals and swaps made
    mid-run never leave it pointing at the wrong step.

    Nothing here is locked.  Callers that drive one stepper from several
    callbacks must serialise those calls themselves.
    """

    def __init__(
        self,
        steps: Iterable[StepAction] = (),
        on_reject: Optional[Callable[[Any], Any]] = None,
        *,
        config: Optional[StepperConfig] = None,
    ) -> None:
        self.config = config if config is not None else StepperConfig()
        self.on_reject: Callable[[Any], Any] = (
            on_reject if on_reject is not None else _noop_reject
        )
        self._ids = self.config.ids()
        self._steps: list[StepHandle] = []
        self._current: Optional[StepHandle] = None
        for action in steps:
            self.add(action)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[StepHandle]:
        return iter(tuple(self._steps))

    def __contains__(self, handle: object) -> bool:
        try:
            self.index(handle)
        except HandleNotFound:
            return False
        return True

    def __repr__(self) -> str:
        return f"Stepper(steps={len(self._steps)}, position={self.position})"

    @property
    def steps(self) -> tuple[StepHandle, ...]:
        return tuple(self._steps)

    @property
    def current(self) -> Optional[StepHandle]:
        """Most recently dispatched (or rewound-to) handle; None when unstarted."""
        return self._current

    @property
    def position(self) -> Optional[int]:
        if self._current is None:
            return None
        return self.index(self._current)

    @property
    def started(self) -> bool:
        return self._current is not None

    def is_last(self, handle: StepHandle) -> bool:
        return self.index(handle) == len(self._steps) - 1

    def snapshot(self) -> StepperSnapshot:
        """Return a serialisable copy of the step list and cursor."""
        return StepperSnapshot(
            steps=[
                StepInfo(
                    id=handle.id,
                    name=handle.name,
                    position=position,
                    current=handle is self._current,
                )
                for position, handle in enumerate(self._steps)
            ],
            cursor=self.position,
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def index(self, handle: object) -> int:
        """Return the position of *handle*, matched by ``id``.

        Raises ``HandleNotFound`` when the handle was removed or belongs to
        another stepper.
        """
        step_id = getattr(handle, "id", None)
        if step_id is not None and getattr(handle, "stepper", None) is self:
            for position, step in enumerate(self._steps):
                if step.id == step_id:
                    return position
        raise HandleNotFound(handle)

    def get_at(self, index: int) -> Optional[StepHandle]:
        """Return the handle at *index*, or None when out of bounds."""
        if 0 <= index < len(self._steps):
            return self._steps[index]
        return None

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------

    def start(self, payload: Any = None) -> None:
        """Reset the cursor and dispatch the first step."""
        logger.debug("Stepper: start (%d steps)", len(self._steps))
        self._current = None
        self.next(payload)

    def next(self, payload: Any = None, from_handle: Optional[StepHandle] = None) -> None:
        """Dispatch the step after the cursor (or after *from_handle*).

        Raises ``SequenceExhausted`` when there is no such step.
        """
        if from_handle is not None:
            target = self.index(from_handle) + 1
            self._current = from_handle
        elif self._current is None:
            target = 0
        else:
            target = self.index(self._current) + 1

        if target >= len(self._steps):
            raise SequenceExhausted(
                'Steps executing are ended. You cannot call "next" method.'
            )

        handle = self._steps[target]
        is_last = target == len(self._steps) - 1
        self._current = handle
        logger.debug(
            "Stepper: dispatch %d/%d %s (is_last=%s)",
            target + 1,
            len(self._steps),
            handle.name,
            is_last,
        )
        handle.execute(payload, is_last)

    def prev(self, distance: int = 1, from_handle: Optional[StepHandle] = None) -> StepHandle:
        """Move the cursor *distance* steps back and return the handle there.

        The handle's action is not executed.  Raises ``NavigationOutOfRange``
        if the target falls outside the step list or nothing has run yet.
        """
        reference = from_handle if from_handle is not None else self._current
        if reference is None:
            raise NavigationOutOfRange("Cannot step back: steps have not started")

        target = self.index(reference) - distance
        if not 0 <= target < len(self._steps):
            raise NavigationOutOfRange(f"Cannot step back on pos {target}")

        self._current = self._steps[target]
        logger.debug("Stepper: rewind to %d %s", target, self._current.name)
        return self._current

    def reject(self, payload: Any = None) -> Any:
        """Call the rejection handler with *payload*.  Cursor is unchanged."""
        logger.debug("Stepper: reject at position %s", self.position)
        return self.on_reject(payload)

    # ------------------------------------------------------------------
    # Structural edits
    # ------------------------------------------------------------------

    def add(self, action: StepAction, index: Optional[int] = None) -> StepHandle:
        """Wrap *action* in a new handle and insert it (default: append)."""
        if self.config.check_arity:
            check_step_arity(action)
        handle = StepHandle(action, self, self._ids())
        if index is None:
            self._steps.append(handle)
        else:
            self._steps.insert(index, handle)
        logger.debug("Stepper: add %r at %s", handle, index)
        return handle

    def insert_before(self, handle: StepHandle, action: StepAction) -> StepHandle:
        return self.add(action, self.index(handle))

    def insert_after(self, handle: StepHandle, action: StepAction) -> StepHandle:
        return self.add(action, self.index(handle) + 1)

    def remove(self, handle: StepHandle) -> None:
        """Remove *handle* from the step list.

        If it was the current step the cursor moves to the step before it,
        or back to unstarted when it was first.
        """
        position = self.index(handle)
        removed = self._steps.pop(position)
        if removed is self._current:
            self._current = self._steps[position - 1] if position > 0 else None
        logger.debug("Stepper: remove %r from %d", removed, position)

    def swap(self, first: StepHandle, second: StepHandle) -> None:
        """Exchange the positions of two handles."""
        first_index = self.index(first)
        second_index = self.index(second)
        self._steps[first_index], self._steps[second_index] = (
            self._steps[second_index],
            self._steps[first_index],
        )
        logger.debug("Stepper: swap %d <-> %d", first_index, second_index)

    # ------------------------------------------------------------------
    # Compilation
    # ------------------------------------------------------------------

    def compile(self) -> Chain:
        """Freeze the current actions into a standalone chain.

        See ``stepper.sequence.sequence``.  Later edits to this stepper do not
        affect the returned chain.
        """
        return sequence(
            [handle.action for handle in self._steps],
            self.on_reject,
            check_arity=self.config.check_arity,
        )

    sequence = compile
