"""
Reduction errors.

Exceptions raised by reducers themselves are never wrapped; these types
only describe misuse of the fold operations.
"""


class FoldError(Exception):
    """Base class for foldkit reduction errors."""


class EmptySequenceError(FoldError, ValueError):
    """Raised when a reduction needs at least one element but got none."""

    def __init__(self, operation: str = "reduce_first") -> None:
        super().__init__(f"{operation}() of empty sequence with no initial accumulator")
        self.operation = operation


class ReducerContractError(FoldError, TypeError):
    """Raised when a reducer is not callable or returns the wrong shape.

    Attributes:
        index: Position of the element being reduced, if known
        value: The offending return value, if any
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        value: object = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.value = value

    def __str__(self) -> str:
        msg = super().__str__()
        if self.index is not None:
            msg = f"{msg} (element index: {self.index})"
        return msg
