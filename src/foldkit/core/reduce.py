"""
Fold operations.

All operations take the reducer in ``(element, accumulator)`` order and
walk the input exactly once, front to back. Inputs may be any iterable,
including generators; ``reduce_while`` stops pulling elements as soon as
the reducer halts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from foldkit.core.errors import EmptySequenceError, ReducerContractError
from foldkit.core.steps import Cont, Halt, Step

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A")
M = TypeVar("M")

Reducer = Callable[[T, A], A]
StepReducer = Callable[[T, A], Step[A]]
Mapper = Callable[[T, A], tuple[M, A]]


def _require_callable(func: Any, name: str) -> None:
    if not callable(func):
        raise ReducerContractError(f"{name} must be callable, got {type(func).__name__}")


def reduce(sequence: Iterable[T], initial: A, reducer: Reducer) -> A:
    """Collapse a sequence into a single accumulator.

    Args:
        sequence: Elements to fold, in order
        initial: Starting accumulator, returned as-is for empty input
        reducer: ``reducer(element, acc) -> new_acc``

    Returns:
        The accumulator after the last element

    Raises:
        ReducerContractError: If reducer is not callable
    """
    _require_callable(reducer, "reducer")

    acc = initial
    count = 0
    for element in sequence:
        acc = reducer(element, acc)
        count += 1

    logger.debug("reduce: folded %d elements", count)
    return acc


def reduce_first(sequence: Iterable[T], reducer: Reducer) -> T:
    """Fold using the first element as the initial accumulator.

    Raises:
        EmptySequenceError: If the sequence has no elements
        ReducerContractError: If reducer is not callable
    """
    _require_callable(reducer, "reducer")

    iterator = iter(sequence)
    try:
        first = next(iterator)
    except StopIteration:
        raise EmptySequenceError("reduce_first") from None

    return reduce(iterator, first, reducer)


def reduce_while(sequence: Iterable[T], initial: A, reducer: StepReducer) -> A:
    """Fold until the reducer asks to stop.

    The reducer returns ``Cont(acc)`` to keep going or ``Halt(acc)`` to
    stop. No further elements are pulled from ``sequence`` after a halt.

    Args:
        sequence: Elements to fold, in order
        initial: Starting accumulator
        reducer: ``reducer(element, acc) -> Cont | Halt``

    Returns:
        The accumulator carried by the halting step, or by the last
        ``Cont`` if the input ran out first

    Raises:
        ReducerContractError: If the reducer returns anything but a step
    """
    _require_callable(reducer, "reducer")

    acc = initial
    for index, element in enumerate(sequence):
        step = reducer(element, acc)
        if not isinstance(step, (Cont, Halt)):
            raise ReducerContractError(
                f"reduce_while reducer must return Cont or Halt, got {type(step).__name__}",
                index=index,
                value=step,
            )
        acc = step.acc
        if step.halted:
            logger.debug("reduce_while: halted at element %d", index)
            return acc

    return acc


def map_reduce(
    sequence: Iterable[T],
    initial: A,
    mapper: Mapper,
) -> tuple[list[M], A]:
    """Map every element while threading an accumulator through.

    Args:
        sequence: Elements to process, in order
        initial: Starting accumulator
        mapper: ``mapper(element, acc) -> (mapped, new_acc)``

    Returns:
        Tuple of (mapped values in input order, final accumulator)

    Raises:
        ReducerContractError: If the mapper does not return a 2-tuple
    """
    _require_callable(mapper, "mapper")

    mapped: list[M] = []
    acc = initial
    for index, element in enumerate(sequence):
        result = mapper(element, acc)
        if not isinstance(result, tuple) or len(result) != 2:
            raise ReducerContractError(
                "map_reduce mapper must return a (mapped, acc) tuple",
                index=index,
                value=result,
            )
        value, acc = result
        mapped.append(value)

    logger.debug("map_reduce: mapped %d elements", len(mapped))
    return mapped, acc


def scan(sequence: Iterable[T], initial: A, reducer: Reducer) -> list[A]:
    """Return every intermediate accumulator of a fold.

    The initial accumulator is not included, so the result has one entry
    per element and its last entry equals ``reduce(sequence, initial, reducer)``.
    """
    _require_callable(reducer, "reducer")

    accumulators: list[A] = []
    acc = initial
    for element in sequence:
        acc = reducer(element, acc)
        accumulators.append(acc)
    return accumulators


def from_binary(op: Callable[[A, T], A]) -> Reducer:
    """Adapt an ``op(acc, element)`` callable to the reducer convention.

    Example:
        >>> import operator
        >>> reduce(["a", "b"], "", from_binary(operator.add))
        'ab'
    """
    _require_callable(op, "op")

    def reducer(element: T, acc: A) -> A:
        return op(acc, element)

    reducer.__name__ = getattr(op, "__name__", "reducer")
    reducer.__doc__ = getattr(op, "__doc__", None)
    return reducer
