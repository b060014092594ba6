"""Tests for map_reduce."""

import pytest

from foldkit.core import ReducerContractError, map_reduce, reduce
from foldkit.models import Move, Position, advance


class TestMapReduce:
    """Tests for mapping with a threaded accumulator."""

    def test_double_and_sum(self):
        """Test mapping each element while summing the originals."""
        mapped, total = map_reduce([1, 2, 3], 0, lambda x, acc: (x * 2, acc + x))

        assert mapped == [2, 4, 6]
        assert total == 6

    def test_numbering(self):
        """Test using the accumulator as a counter."""
        mapped, count = map_reduce(["a", "b", "c"], 1, lambda x, n: (f"{n}. {x}", n + 1))

        assert mapped == ["1. a", "2. b", "3. c"]
        assert count == 4

    def test_empty(self):
        """Test that empty input gives no values and the initial accumulator."""
        assert map_reduce([], 7, lambda x, acc: (x, acc)) == ([], 7)

    def test_accumulator_matches_reduce(self):
        """Test that the accumulator part agrees with a plain fold."""
        moves = [Move(dx=1), Move(dy=-2), Move(dx=3, dy=3)]

        positions, final = map_reduce(
            moves,
            Position(),
            lambda m, pos: (advance(m, pos), advance(m, pos)),
        )

        assert final == reduce(moves, Position(), advance)
        assert positions[-1] == final
        assert len(positions) == len(moves)

    def test_mapper_must_return_pair(self):
        """Test that a bare value is rejected."""
        with pytest.raises(ReducerContractError) as exc_info:
            map_reduce([1, 2], 0, lambda x, acc: acc + x)

        assert exc_info.value.index == 0

    def test_mapper_triple_rejected(self):
        """Test that tuples of the wrong size are rejected."""
        with pytest.raises(ReducerContractError):
            map_reduce([1], 0, lambda x, acc: (x, acc, None))

    def test_non_callable_mapper(self):
        with pytest.raises(ReducerContractError, match="mapper must be callable"):
            map_reduce([1], 0, "nope")
