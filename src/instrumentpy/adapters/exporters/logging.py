"""Span exporter that writes finished spans to Python's logging module.

Each span becomes one log record whose message names the span and whose
``extra`` fields carry its identifiers and timing, so handlers that keep
structured fields (JSON formatters, log shippers) can index them.
"""

import logging
from collections.abc import Sequence

from instrumentpy.core.span_data import SpanData

_DEFAULT_LOGGER = logging.getLogger(__name__)


class LoggingSpanExporter:
    """SpanExporterPort implementation backed by a logging.Logger.

    Example:
        ```python
        logging.basicConfig(level=logging.INFO)
        exporter = LoggingSpanExporter()
        exporter.export([span_data])
        ```
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ) -> None:
        """Initialize the exporter.

        Args:
            logger: Logger to write to. Defaults to this module's logger.
            level: Level used for every span record (default: INFO).
        """
        self._logger = logger or _DEFAULT_LOGGER
        self._level = level
        self._stopped = False

    def export(self, spans: Sequence[SpanData]) -> None:
        """Log one record per span."""
        if self._stopped:
            self._logger.warning(
                "Exporter already shut down, dropping %d spans", len(spans)
            )
            return
        for span in spans:
            self._logger.log(
                self._level,
                "span %s (%s) took %d ns",
                span.name,
                span.kind.value,
                span.duration_nanos,
                extra=_span_fields(span),
            )

    def shutdown(self) -> None:
        self._stopped = True


def _span_fields(span: SpanData) -> dict[str, str | int | bool]:
    """Structured fields attached to a span's log record.

    Keys are prefixed so they never collide with standard LogRecord
    attributes (logging rejects ``extra`` keys such as "name").
    """
    return {
        "span_name": span.name,
        "span_trace_id": span.trace_id,
        "span_span_id": span.span_id,
        "span_parent_span_id": span.parent_span_id,
        "span_kind": span.kind.value,
        "span_status": span.status.status_code.value,
        "span_start_epoch_nanos": span.start_epoch_nanos,
        "span_end_epoch_nanos": span.end_epoch_nanos,
        "span_attribute_count": len(span.attributes),
        "span_total_attribute_count": span.total_attribute_count,
        "span_event_count": len(span.events),
        "span_link_count": len(span.links),
    }
