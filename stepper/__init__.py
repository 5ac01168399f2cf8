"""Editable, navigable step sequences.

Public surface::

    from stepper import (
        Stepper,
        StepHandle,
        StepperConfig,
        sequence,
        ChainContext,
        StepperSnapshot,
        SequenceExhausted,
        NavigationOutOfRange,
        HandleNotFound,
    )
"""

from .config import StepperConfig
from .errors import (
    HandleNotFound,
    NavigationOutOfRange,
    SequenceExhausted,
    StepperError,
    StepSignatureError,
)
from .handle import StepHandle
from .ids import IdGenerator
from .protocol import StepAction, check_step_arity
from .sequence import ChainContext, sequence
from .snapshot import StepInfo, StepperSnapshot
from .stepper import Stepper

__all__ = [
    "Stepper",
    "StepHandle",
    "StepperConfig",
    "IdGenerator",
    "StepAction",
    "check_step_arity",
    "sequence",
    "ChainContext",
    "StepInfo",
    "StepperSnapshot",
    "StepperError",
    "SequenceExhausted",
    "NavigationOutOfRange",
    "HandleNotFound",
    "StepSignatureError",
]
