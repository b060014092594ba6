"""
Grid positions and moves.

A walk over a grid is the canonical fold example: each move is an element,
the current position is the accumulator, and the final position is the
sum of all deltas.
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from foldkit.models.base import Direction


class Move(BaseModel):
    """A positional delta.

    Attributes:
        dx: Change along the x axis
        dy: Change along the y axis
    """

    model_config = ConfigDict(frozen=True)

    dx: int = Field(default=0, description="Change along x")
    dy: int = Field(default=0, description="Change along y")

    @classmethod
    def parse(cls, text: str) -> "Move":
        """Parse a move from text.

        Accepted forms:
        - "dx,dy", e.g. "3,-1"
        - "<direction> [steps]", e.g. "up", "left 4"

        Raises:
            ValueError: If the text is not a recognizable move
        """
        raw = text.strip()
        if not raw:
            raise ValueError("Empty move")

        if "," in raw:
            parts = [p.strip() for p in raw.split(",")]
            if len(parts) != 2:
                raise ValueError(f"Invalid move: {text!r} (expected 'dx,dy')")
            try:
                return cls(dx=int(parts[0]), dy=int(parts[1]))
            except ValueError:
                raise ValueError(f"Invalid move: {text!r} (deltas must be integers)") from None

        words = raw.lower().split()
        if len(words) > 2:
            raise ValueError(f"Invalid move: {text!r}")
        try:
            direction = Direction(words[0])
        except ValueError:
            valid = ", ".join(d.value for d in Direction)
            raise ValueError(f"Unknown direction {words[0]!r} (expected one of: {valid})") from None

        steps = 1
        if len(words) == 2:
            try:
                steps = int(words[1])
            except ValueError:
                raise ValueError(f"Invalid step count in move: {text!r}") from None

        dx, dy = direction.delta
        return cls(dx=dx * steps, dy=dy * steps)


class Position(BaseModel):
    """A point on the grid."""

    model_config = ConfigDict(frozen=True)

    x: int = 0
    y: int = 0

    def apply(self, move: Move) -> "Position":
        """Return the position reached by applying ``move``."""
        return Position(x=self.x + move.dx, y=self.y + move.dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def advance(move: Move, position: Position) -> Position:
    """Move-accumulating reducer: element is a move, accumulator a position."""
    return position.apply(move)


def walk(moves: Iterable[Move], start: Position | None = None) -> Position:
    """Reduce a sequence of moves to the final position."""
    from foldkit.core.reduce import reduce

    return reduce(moves, start or Position(), advance)
