"""
Core fold operations.

This module provides:
- reduce / reduce_first: plain folds
- reduce_while: folds that can stop early via Cont/Halt steps
- map_reduce: map with a threaded accumulator
- scan: every intermediate accumulator
- trace_reduce: a fold that records its steps
"""

from foldkit.core.errors import EmptySequenceError, FoldError, ReducerContractError
from foldkit.core.reduce import (
    Mapper,
    Reducer,
    StepReducer,
    from_binary,
    map_reduce,
    reduce,
    reduce_first,
    reduce_while,
    scan,
)
from foldkit.core.steps import Cont, Halt, Step, step_for
from foldkit.core.trace import trace_reduce

__all__ = [
    # Operations
    "reduce",
    "reduce_first",
    "reduce_while",
    "map_reduce",
    "scan",
    "from_binary",
    "trace_reduce",
    # Steps
    "Step",
    "Cont",
    "Halt",
    "step_for",
    # Types
    "Reducer",
    "StepReducer",
    "Mapper",
    # Errors
    "FoldError",
    "EmptySequenceError",
    "ReducerContractError",
]
