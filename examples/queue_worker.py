"""Queue worker example: gauge series plus span snapshots.

Records queue depth per queue on a gauge, builds a SpanData for each
processed job and logs it through LoggingSpanExporter.

Run with:
    python examples/queue_worker.py
"""

import logging
import random
import secrets
import time

from instrumentpy import (
    GaugeDouble,
    InstrumentationLibraryInfo,
    LoggingSpanExporter,
    SpanData,
    SpanKind,
    Status,
)

logger = logging.getLogger(__name__)

LIBRARY = InstrumentationLibraryInfo("queue_worker", "0.1.0")


def process_job(queue: str, exporter: LoggingSpanExporter) -> None:
    """Pretend to process one job and export its span."""
    start = time.time_ns()
    time.sleep(random.uniform(0.001, 0.01))
    end = time.time_ns()

    span = (
        SpanData.builder()
        .set_trace_id(secrets.token_hex(16))
        .set_span_id(secrets.token_hex(8))
        .set_name(f"process {queue}")
        .set_kind(SpanKind.CONSUMER)
        .set_status(Status.ok())
        .set_start_epoch_nanos(start)
        .set_end_epoch_nanos(end)
        .set_has_ended(True)
        .set_instrumentation_library_info(LIBRARY)
        .set_attributes({"queue": queue})
        .set_total_attribute_count(1)
        .build()
    )
    exporter.export([span])


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    exporter = LoggingSpanExporter()
    queue_depth = GaugeDouble("queue_depth", label_keys=["queue"], unit="{jobs}")

    for queue in ("emails", "reports"):
        queue_depth.get_or_create_time_series([queue]).set(5)

    for _ in range(6):
        queue = random.choice(["emails", "reports"])
        process_job(queue, exporter)
        queue_depth.get_or_create_time_series([queue]).add(-1)

    for sample in queue_depth.collect():
        logger.info("%s%s = %s", sample.name, sample.labels, sample.value)

    exporter.shutdown()


if __name__ == "__main__":
    main()
