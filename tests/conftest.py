"""Shared test fixtures for all test modules."""

from collections.abc import Callable

import pytest

from instrumentpy.core.models import SpanKind, Status
from instrumentpy.core.span_data import SpanData, SpanDataBuilder

START_EPOCH_NANOS = 3000 * 1_000_000_000 + 200
END_EPOCH_NANOS = 3001 * 1_000_000_000 + 255

TRACE_ID = "4bf92f3577b34da6a3ce929d0e0e4736"
SPAN_ID = "00f067aa0ba902b7"


@pytest.fixture
def basic_span_builder() -> SpanDataBuilder:
    """Builder with every required field set and nothing else."""
    return (
        SpanData.builder()
        .set_has_ended(True)
        .set_trace_id(TRACE_ID)
        .set_span_id(SPAN_ID)
        .set_name("spanName")
        .set_start_epoch_nanos(START_EPOCH_NANOS)
        .set_end_epoch_nanos(END_EPOCH_NANOS)
        .set_kind(SpanKind.SERVER)
        .set_status(Status.ok())
        .set_has_remote_parent(False)
        .set_total_recorded_events(0)
        .set_total_recorded_links(0)
    )


@pytest.fixture
def make_span(basic_span_builder: SpanDataBuilder) -> Callable[..., SpanData]:
    """Factory fixture building a span named after its argument.

    Used by exporter tests that need several distinguishable spans.
    """

    def _make(name: str = "spanName") -> SpanData:
        return basic_span_builder.set_name(name).build()

    return _make
