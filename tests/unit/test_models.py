"""Tests for core trace value types."""

import pytest

from instrumentpy.core.frozen import EMPTY_ATTRIBUTES, FrozenAttributes
from instrumentpy.core.models import (
    INVALID_SPAN_ID,
    INVALID_TRACE_ID,
    InstrumentationLibraryInfo,
    Resource,
    SpanContext,
    Status,
    StatusCode,
    is_valid_span_id,
    is_valid_trace_id,
)

pytestmark = [
    pytest.mark.core,
    pytest.mark.tier(0),
    pytest.mark.tra("Core.Models"),
]


class TestIds:
    """Tests for trace and span id validation."""

    @pytest.mark.parametrize(
        ("span_id", "expected"),
        [
            ("00f067aa0ba902b7", True),
            (INVALID_SPAN_ID, False),
            ("00F067AA0BA902B7", False),
            ("00f067aa0ba902", False),
            ("zzf067aa0ba902b7", False),
        ],
    )
    def test_is_valid_span_id(self, span_id: str, expected: bool) -> None:
        """Only 16 lowercase hex chars that are not all zeros are valid."""
        assert is_valid_span_id(span_id) is expected

    def test_is_valid_trace_id(self) -> None:
        """The all-zero trace id is invalid."""
        assert is_valid_trace_id("4bf92f3577b34da6a3ce929d0e0e4736")
        assert not is_valid_trace_id(INVALID_TRACE_ID)


class TestSpanContext:
    """Tests for SpanContext."""

    def test_invalid_context_is_shared_and_invalid(self) -> None:
        """SpanContext.invalid() is a single invalid instance."""
        assert SpanContext.invalid() is SpanContext.invalid()
        assert not SpanContext.invalid().is_valid

    def test_valid_context(self) -> None:
        """Valid ids make a valid context."""
        context = SpanContext("4bf92f3577b34da6a3ce929d0e0e4736", "00f067aa0ba902b7")

        assert context.is_valid
        assert context.trace_state is EMPTY_ATTRIBUTES

    def test_sampled_flag(self) -> None:
        """Bit 0 of trace_flags marks the context sampled."""
        assert SpanContext(INVALID_TRACE_ID, INVALID_SPAN_ID, trace_flags=1).is_sampled
        assert not SpanContext(INVALID_TRACE_ID, INVALID_SPAN_ID).is_sampled

    def test_trace_state_is_frozen(self) -> None:
        """A dict passed as trace_state is copied into FrozenAttributes."""
        state = {"vendor": "value"}
        context = SpanContext(INVALID_TRACE_ID, INVALID_SPAN_ID, trace_state=state)

        state["vendor"] = "changed"

        assert isinstance(context.trace_state, FrozenAttributes)
        assert context.trace_state == {"vendor": "value"}


class TestStatus:
    """Tests for Status."""

    def test_factories(self) -> None:
        """ok(), unset() and error() set the matching code."""
        assert Status.ok().status_code is StatusCode.OK
        assert Status.unset().status_code is StatusCode.UNSET
        assert Status.error("boom") == Status(StatusCode.ERROR, "boom")

    def test_only_error_is_not_ok(self) -> None:
        """is_ok is False only for ERROR."""
        assert Status.ok().is_ok
        assert Status.unset().is_ok
        assert not Status.error().is_ok


class TestSharedEmpties:
    """Tests for the shared empty library info and resource."""

    def test_empty_library_info_is_shared(self) -> None:
        """InstrumentationLibraryInfo.empty() is a singleton with no name."""
        assert InstrumentationLibraryInfo.empty() is InstrumentationLibraryInfo.empty()
        assert InstrumentationLibraryInfo.empty().name == ""

    def test_empty_resource_is_shared(self) -> None:
        """Resource.empty() is a singleton without attributes."""
        assert Resource.empty() is Resource.empty()
        assert Resource.empty().attributes is EMPTY_ATTRIBUTES
