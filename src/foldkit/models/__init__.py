"""
foldkit data models.

Pydantic models for the worked examples (grid walks) and for
reduction traces.
"""

from foldkit.models.base import Direction, StepAction
from foldkit.models.position import Move, Position, advance, walk
from foldkit.models.trace import ReductionTrace, TraceStep

__all__ = [
    "StepAction",
    "Direction",
    "Move",
    "Position",
    "advance",
    "walk",
    "TraceStep",
    "ReductionTrace",
]
