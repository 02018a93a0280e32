"""instrumentpy - gauge time series and immutable span snapshots."""

from instrumentpy.adapters.exporters import InMemorySpanExporter, LoggingSpanExporter
from instrumentpy.core.errors import IncompleteSpanDataError, UnsupportedMutationError
from instrumentpy.core.frozen import (
    EMPTY_ATTRIBUTES,
    EMPTY_LIST,
    FrozenAttributes,
    FrozenList,
)
from instrumentpy.core.gauge import GaugeDouble, GaugeInstrument, GaugeLong
from instrumentpy.core.models import (
    INVALID_SPAN_ID,
    INVALID_TRACE_ID,
    InstrumentationLibraryInfo,
    MetricSample,
    Resource,
    SpanContext,
    SpanKind,
    Status,
    StatusCode,
)
from instrumentpy.core.ports import SpanExporterPort, TimeSeriesPort
from instrumentpy.core.span_data import Event, Link, SpanData, SpanDataBuilder
from instrumentpy.core.timeseries import TimeSeries, TimeSeriesRegistry

__all__ = [
    # Gauges
    "GaugeDouble",
    "GaugeInstrument",
    "GaugeLong",
    "TimeSeries",
    "TimeSeriesRegistry",
    "MetricSample",
    # Spans
    "Event",
    "Link",
    "SpanData",
    "SpanDataBuilder",
    "SpanContext",
    "SpanKind",
    "Status",
    "StatusCode",
    "InstrumentationLibraryInfo",
    "Resource",
    "INVALID_SPAN_ID",
    "INVALID_TRACE_ID",
    # Collections and errors
    "EMPTY_ATTRIBUTES",
    "EMPTY_LIST",
    "FrozenAttributes",
    "FrozenList",
    "IncompleteSpanDataError",
    "UnsupportedMutationError",
    # Ports and adapters
    "SpanExporterPort",
    "TimeSeriesPort",
    "InMemorySpanExporter",
    "LoggingSpanExporter",
]
