"""
Traced reductions.

Runs an ordinary fold while recording each step in a ``ReductionTrace``,
so a reduction can be inspected or rendered after the fact.
"""

import logging
from collections.abc import Iterable
from typing import Any

from foldkit.core.reduce import Reducer, _require_callable
from foldkit.models.trace import ReductionTrace, TraceStep

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 1000


def _default_max_steps() -> int:
    from foldkit.config import get_config

    try:
        return get_config().trace.max_steps
    except RuntimeError:
        return DEFAULT_MAX_STEPS


def trace_reduce(
    sequence: Iterable[Any],
    initial: Any,
    reducer: Reducer,
    max_steps: int | None = None,
) -> ReductionTrace:
    """Reduce a sequence and record every step.

    The fold always runs to completion. Only the first ``max_steps``
    steps are stored; the trace is marked truncated when more ran.

    Args:
        sequence: Elements to fold
        initial: Starting accumulator
        reducer: ``reducer(element, acc) -> new_acc``
        max_steps: Recording limit. Defaults to ``trace.max_steps`` from
            the loaded configuration, or 1000 when none is loaded.

    Returns:
        ReductionTrace with the result and recorded steps
    """
    _require_callable(reducer, "reducer")
    if max_steps is None:
        max_steps = _default_max_steps()
    if max_steps < 1:
        raise ValueError(f"max_steps must be at least 1, got {max_steps}")

    steps: list[TraceStep] = []
    acc = initial
    count = 0
    for element in sequence:
        acc = reducer(element, acc)
        if count < max_steps:
            steps.append(TraceStep(index=count, element=element, accumulator=acc))
        count += 1

    truncated = count > max_steps
    if truncated:
        logger.debug("trace_reduce: recorded %d of %d steps", max_steps, count)

    return ReductionTrace(
        initial=initial,
        result=acc,
        steps=steps,
        step_count=count,
        truncated=truncated,
    )
