"""Identity source for step handles."""

from __future__ import annotations

import itertools
import threading


class IdGenerator:
    """Monotonic integer source.  Ids are never reused.

    One shared instance (``default_ids``) backs every ``Stepper`` that is not
    given its own, so handle ids are unique across steppers in the process.
    """

    def __init__(self, start: int = 0) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            return next(self._counter)


default_ids = IdGenerator()
