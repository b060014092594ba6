"""
Built-in reducers.

Every reducer takes ``(element, acc)`` and returns the new accumulator.
"""

from typing import Any

from foldkit.models.position import Move, Position, advance
from foldkit.reducers.registry import ReducerSpec


def add(element: Any, acc: Any) -> Any:
    return acc + element


def multiply(element: Any, acc: Any) -> Any:
    return acc * element


def maximum(element: Any, acc: Any) -> Any:
    # None accumulator means nothing seen yet
    if acc is None or element > acc:
        return element
    return acc


def minimum(element: Any, acc: Any) -> Any:
    if acc is None or element < acc:
        return element
    return acc


def count(element: Any, acc: int) -> int:
    return acc + 1


def concat(element: Any, acc: str) -> str:
    return acc + str(element)


def append(element: Any, acc: list[Any]) -> list[Any]:
    return [*acc, element]


def move(element: Move | str, acc: Position) -> Position:
    """Grid walk reducer that also accepts textual moves."""
    if isinstance(element, str):
        element = Move.parse(element)
    return advance(element, acc)


BUILTIN_REDUCERS = [
    ReducerSpec("add", add, int, "Sum of elements"),
    ReducerSpec("multiply", multiply, lambda: 1, "Product of elements"),
    ReducerSpec("max", maximum, lambda: None, "Largest element"),
    ReducerSpec("min", minimum, lambda: None, "Smallest element"),
    ReducerSpec("count", count, int, "Number of elements"),
    ReducerSpec("concat", concat, str, "Elements joined as text"),
    ReducerSpec("append", append, list, "Elements collected into a list"),
    ReducerSpec("move", move, Position, "Final position of a walk"),
]
