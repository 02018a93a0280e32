"""Port interfaces for collaborators outside the measurement core.

The core hands finished SpanData to anything implementing SpanExporterPort
and exposes gauge series through TimeSeriesPort. Neither side depends on a
concrete implementation.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from instrumentpy.core.span_data import SpanData


@runtime_checkable
class SpanExporterPort(Protocol):
    """Port for consumers of finished span snapshots.

    Examples: InMemorySpanExporter, LoggingSpanExporter.
    """

    def export(self, spans: Sequence[SpanData]) -> None:
        """Accept a batch of finished spans."""
        ...

    def shutdown(self) -> None:
        """Release resources; later exports are ignored."""
        ...


@runtime_checkable
class TimeSeriesPort(Protocol):
    """Port for a single mutable gauge series."""

    def add(self, amount: float) -> None:
        """Add amount (possibly negative) to the current value."""
        ...

    def set(self, value: float) -> None:
        """Replace the current value."""
        ...
