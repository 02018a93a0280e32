"""In-memory span exporter.

Keeps exported spans in a list, or in a bounded ring buffer that evicts the
oldest span when ``max_size`` is given. Suitable for tests and for
inspecting spans in-process.
"""

import logging
import threading
from collections import deque
from collections.abc import Sequence

from instrumentpy.core.span_data import SpanData

logger = logging.getLogger(__name__)


class InMemorySpanExporter:
    """In-memory implementation of SpanExporterPort.

    Args:
        max_size: Maximum number of spans to keep. None keeps all of them.
    """

    def __init__(self, max_size: int | None = None) -> None:
        self._spans: deque[SpanData] = deque(maxlen=max_size)
        self._lock = threading.Lock()
        self._stopped = False

    def export(self, spans: Sequence[SpanData]) -> None:
        """Store a batch of finished spans."""
        if self._stopped:
            logger.warning("Exporter already shut down, dropping %d spans", len(spans))
            return
        with self._lock:
            self._spans.extend(spans)

    def get_finished_spans(self) -> list[SpanData]:
        """Return the stored spans, oldest first."""
        with self._lock:
            return list(self._spans)

    def clear(self) -> None:
        """Drop every stored span."""
        with self._lock:
            self._spans.clear()

    def shutdown(self) -> None:
        self._stopped = True
