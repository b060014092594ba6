"""
foldkit: the reduce (fold) abstraction and its variants.

A reduction collapses a sequence into a single accumulated value by
applying a reducer to each element in turn. foldkit provides the plain
fold and the common variants around it:

- reduce / reduce_first: plain folds
- reduce_while: a fold that can stop early (Cont / Halt)
- map_reduce: map every element while threading an accumulator
- scan: every intermediate accumulator
- trace_reduce: a fold that records each step

Example:
    from foldkit import reduce, Halt, Cont, reduce_while

    reduce([1, 2, 3], 0, lambda x, acc: acc + x)  # 6

    reduce_while(
        [1, 2, 3, 4],
        0,
        lambda x, acc: Halt(acc) if acc + x > 5 else Cont(acc + x),
    )  # 3
"""

from foldkit.core import (
    Cont,
    EmptySequenceError,
    FoldError,
    Halt,
    ReducerContractError,
    Step,
    from_binary,
    map_reduce,
    reduce,
    reduce_first,
    reduce_while,
    scan,
    trace_reduce,
)
from foldkit.models import Move, Position, ReductionTrace, walk
from foldkit.version import __version__

__all__ = [
    "__version__",
    "reduce",
    "reduce_first",
    "reduce_while",
    "map_reduce",
    "scan",
    "from_binary",
    "trace_reduce",
    "Step",
    "Cont",
    "Halt",
    "FoldError",
    "EmptySequenceError",
    "ReducerContractError",
    "Move",
    "Position",
    "ReductionTrace",
    "walk",
]
