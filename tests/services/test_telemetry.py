"""Tests for telemetry spans and the @traced decorator."""

from __future__ import annotations

from gostd.services.result import ServiceResult
from gostd.services.telemetry import (
    Span,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)


@traced
def _operation() -> ServiceResult:
    with trace_span("inner") as span:
        if span:
            span.annotate("step", 1)
    return ServiceResult(ok=True, op="probe", meta={"existing": True})


@traced
def _plain() -> int:
    return 42


class TestSpan:
    def test_duration_zero_until_ended(self) -> None:
        span = Span(name="s")
        assert span.duration_ms == 0.0
        span.end()
        assert span.duration_ms >= 0.0

    def test_to_dict_nesting(self) -> None:
        parent = Span(name="p")
        child = Span(name="c")
        child.annotate("k", "v")
        parent.children.append(child)
        child.end()
        parent.end()
        data = parent.to_dict()
        assert data["name"] == "p"
        assert data["children"][0]["annotations"] == {"k": "v"}


class TestTraced:
    def test_disabled_is_passthrough(self) -> None:
        result = _operation()
        assert result.meta == {"existing": True}
        assert get_current_span() is None

    def test_enabled_injects_meta(self) -> None:
        enable_telemetry()
        result = _operation()
        assert result.meta is not None
        assert result.meta["existing"] is True
        tree = result.meta["telemetry"]
        assert tree["name"] == "_operation"
        assert tree["children"][0] == {
            "name": "inner",
            "duration_ms": tree["children"][0]["duration_ms"],
            "annotations": {"step": 1},
        }

    def test_non_result_return_untouched(self) -> None:
        enable_telemetry()
        assert _plain() == 42

    def test_trace_span_outside_traced_call(self) -> None:
        enable_telemetry()
        with trace_span("orphan") as span:
            assert span is None
