"""Tests for reduction trace models."""

import pytest
from pydantic import ValidationError

from foldkit.models import Position, ReductionTrace, TraceStep


class TestTraceStep:
    """Tests for TraceStep model."""

    def test_creation(self):
        step = TraceStep(index=0, element=1, accumulator=1)

        assert step.index == 0
        assert step.element == 1

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            TraceStep(index=-1, element=1, accumulator=1)

    def test_keeps_arbitrary_values(self):
        position = Position(x=1, y=2)
        step = TraceStep(index=0, element="up", accumulator=position)

        assert step.accumulator is position


class TestReductionTrace:
    """Tests for ReductionTrace model."""

    @pytest.fixture
    def trace(self) -> ReductionTrace:
        return ReductionTrace(
            initial=0,
            result=3,
            steps=[
                TraceStep(index=0, element=1, accumulator=1),
                TraceStep(index=1, element=2, accumulator=3),
            ],
            step_count=2,
        )

    def test_recorded(self, trace):
        assert trace.recorded == 2
        assert not trace.truncated

    def test_accumulators(self, trace):
        assert trace.accumulators() == [1, 3]

    def test_to_rows(self, trace):
        assert trace.to_rows() == [("0", "1", "1"), ("1", "2", "3")]

    def test_serialization_includes_recorded(self, trace):
        data = trace.model_dump()

        assert data["recorded"] == 2
        assert data["result"] == 3

    def test_defaults(self):
        trace = ReductionTrace(initial=None, result=None)

        assert trace.steps == []
        assert trace.step_count == 0
