"""Tests for reduce_while and its step values."""

import pytest

from foldkit.core import Cont, Halt, ReducerContractError, Step, reduce_while, step_for
from foldkit.models import StepAction


def sum_below(limit):
    def reducer(x, acc):
        if acc + x > limit:
            return Halt(acc)
        return Cont(acc + x)

    return reducer


class TestSteps:
    """Tests for Cont and Halt."""

    def test_cont(self):
        step = Cont(5)

        assert step.acc == 5
        assert step.action == StepAction.CONT
        assert not step.halted

    def test_halt(self):
        step = Halt("done")

        assert step.acc == "done"
        assert step.action == StepAction.HALT
        assert step.halted

    def test_steps_are_steps(self):
        assert isinstance(Cont(1), Step)
        assert isinstance(Halt(1), Step)

    def test_equality(self):
        """Test that steps compare by kind and accumulator."""
        assert Cont(1) == Cont(1)
        assert Cont(1) != Halt(1)

    def test_step_for(self):
        assert step_for("halt", 3) == Halt(3)
        assert step_for(StepAction.CONT, 3) == Cont(3)

    def test_step_for_unknown_action(self):
        with pytest.raises(ValueError):
            step_for("pause", 3)


class TestReduceWhile:
    """Tests for early-terminating folds."""

    def test_runs_to_end_without_halt(self):
        """Test that a fold with only Cont steps behaves like reduce."""
        assert reduce_while([1, 2, 3], 0, lambda x, acc: Cont(acc + x)) == 6

    def test_halts(self):
        """Test that the halting accumulator is returned."""
        assert reduce_while([1, 2, 3, 4], 0, sum_below(5)) == 3

    def test_halt_value_is_returned_as_is(self):
        """Test that Halt can carry a value different from the running one."""
        result = reduce_while([1, 2, 3], 0, lambda x, acc: Halt("stopped") if x == 2 else Cont(acc + x))

        assert result == "stopped"

    def test_stops_pulling_elements(self):
        """Test that no element after the halt is consumed."""
        pulled = []

        def source():
            for x in range(10):
                pulled.append(x)
                yield x

        reduce_while(source(), 0, lambda x, acc: Halt(acc) if x == 3 else Cont(acc + x))

        assert pulled == [0, 1, 2, 3]

    def test_empty(self):
        """Test that empty input returns the initial accumulator."""
        assert reduce_while([], "init", lambda x, acc: Halt(x)) == "init"

    def test_bad_return_value(self):
        """Test that a plain value instead of a step is rejected."""
        with pytest.raises(ReducerContractError) as exc_info:
            reduce_while([1, 2, 3], 0, lambda x, acc: acc + x)

        assert exc_info.value.index == 0
        assert exc_info.value.value == 1
        assert "Cont or Halt" in str(exc_info.value)

    def test_bad_return_value_index(self):
        """Test that the error names the offending element."""
        with pytest.raises(ReducerContractError) as exc_info:
            reduce_while([1, 2, 3], 0, lambda x, acc: Cont(acc) if x < 3 else None)

        assert exc_info.value.index == 2
        assert "element index: 2" in str(exc_info.value)

    def test_base_step_is_rejected(self):
        """Test that only Cont and Halt count as steps."""
        with pytest.raises(ReducerContractError) as exc_info:
            reduce_while([1, 2], 0, lambda x, acc: Step(acc + x))

        assert exc_info.value.index == 0
        assert "got Step" in str(exc_info.value)
