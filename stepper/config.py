"""Configuration for Stepper instances."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .ids import IdGenerator, default_ids


@dataclass
class StepperConfig:
    """Configuration for a ``Stepper``."""

    # Reject actions that cannot take (context, payload, is_last)
    check_arity: bool = True

    # None -> the process-wide ``default_ids``
    id_generator: Optional[IdGenerator] = None

    def ids(self) -> IdGenerator:
        return self.id_generator if self.id_generator is not None else default_ids
