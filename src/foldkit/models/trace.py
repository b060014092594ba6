"""
Reduction trace models.

Captured by ``trace_reduce`` so a fold can be inspected step by step.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field


class TraceStep(BaseModel):
    """One reducer application.

    Attributes:
        index: Zero-based position of the element in the input
        element: The element passed to the reducer
        accumulator: Accumulator returned by the reducer
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    index: int = Field(..., ge=0, description="Element position")
    element: Any = Field(..., description="Reduced element")
    accumulator: Any = Field(..., description="Accumulator after this step")


class ReductionTrace(BaseModel):
    """Record of a complete reduction.

    Attributes:
        initial: Starting accumulator
        result: Final accumulator
        steps: Recorded steps, possibly truncated
        step_count: Number of elements actually reduced
        truncated: Whether steps were dropped from the record
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    initial: Any = Field(..., description="Starting accumulator")
    result: Any = Field(..., description="Final accumulator")
    steps: list[TraceStep] = Field(default_factory=list, description="Recorded steps")
    step_count: int = Field(default=0, ge=0, description="Elements reduced")
    truncated: bool = Field(default=False, description="Steps were dropped")

    @computed_field
    @property
    def recorded(self) -> int:
        """Number of steps kept in the record."""
        return len(self.steps)

    def accumulators(self) -> list[Any]:
        """Recorded accumulators in order."""
        return [step.accumulator for step in self.steps]

    def to_rows(self) -> list[tuple[str, str, str]]:
        """Rows of (index, element, accumulator) as display strings."""
        return [(str(s.index), repr(s.element), repr(s.accumulator)) for s in self.steps]
