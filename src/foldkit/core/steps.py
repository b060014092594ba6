"""
Step values returned by ``reduce_while`` reducers.

A reducer passed to ``reduce_while`` wraps its new accumulator in either
``Cont`` (keep folding) or ``Halt`` (stop and return this accumulator).
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from foldkit.models.base import StepAction

A = TypeVar("A")


@dataclass(frozen=True)
class Step(Generic[A]):
    """Base step carrying the next accumulator.

    Not returned by reducers directly; ``reduce_while`` only accepts
    ``Cont`` and ``Halt``.
    """

    acc: A

    action = StepAction.CONT

    @property
    def halted(self) -> bool:
        return self.action == StepAction.HALT


@dataclass(frozen=True)
class Cont(Step[A]):
    """Continue reducing with ``acc``."""

    action = StepAction.CONT


@dataclass(frozen=True)
class Halt(Step[A]):
    """Stop reducing; ``acc`` is the final result."""

    action = StepAction.HALT


def step_for(action: StepAction | str, acc: Any) -> Step[Any]:
    """Build a step from an action name.

    Args:
        action: ``StepAction`` or its string value ("cont" / "halt")
        acc: Accumulator to carry

    Returns:
        ``Cont`` or ``Halt`` instance

    Raises:
        ValueError: If the action name is unknown
    """
    action = StepAction(action)
    if action == StepAction.HALT:
        return Halt(acc)
    return Cont(acc)
