"""Read-only views of a Stepper's state."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class StepInfo(BaseModel):
    """One step as seen at snapshot time."""

    id: int = Field(..., description="Handle id, unique within the process")
    name: str = Field(..., description="Name of the wrapped action")
    position: int = Field(..., ge=0, description="Index in the step list")
    current: bool = Field(
        default=False, description="Whether the cursor points at this step"
    )


class StepperSnapshot(BaseModel):
    """Point-in-time copy of a Stepper's step list and cursor.

    Later edits to the stepper do not change an existing snapshot.
    """

    steps: List[StepInfo] = Field(default_factory=list)
    cursor: Optional[int] = Field(
        default=None, description="Position of the current step, None when unstarted"
    )

    @property
    def started(self) -> bool:
        return self.cursor is not None

    @property
    def names(self) -> List[str]:
        return [step.name for step in self.steps]
