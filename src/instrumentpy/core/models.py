"""Core value types shared by the gauge and span snapshot modules."""

import enum
import string
from dataclasses import dataclass, field

from instrumentpy.core.frozen import (
    EMPTY_ATTRIBUTES,
    FrozenAttributes,
    freeze_attributes,
)

INVALID_TRACE_ID = "0" * 32
INVALID_SPAN_ID = "0" * 16

SAMPLED_FLAG = 0x01

_HEX_DIGITS = frozenset(string.hexdigits.lower())


def _is_valid_hex_id(value: str, length: int) -> bool:
    return (
        len(value) == length
        and set(value) <= _HEX_DIGITS
        and value != "0" * length
    )


def is_valid_trace_id(trace_id: str) -> bool:
    """Return True for a 32 character lowercase hex id that is not all zeros."""
    return _is_valid_hex_id(trace_id, 32)


def is_valid_span_id(span_id: str) -> bool:
    """Return True for a 16 character lowercase hex id that is not all zeros."""
    return _is_valid_hex_id(span_id, 16)


@dataclass(frozen=True)
class SpanContext:
    """Identity of a span as seen by other spans and processes.

    Attributes:
        trace_id: 32 character hex trace id.
        span_id: 16 character hex span id.
        trace_flags: W3C trace flags byte.
        trace_state: Vendor specific key/value pairs.
        is_remote: True when the context was propagated from another process.
    """

    trace_id: str
    span_id: str
    trace_flags: int = 0
    trace_state: FrozenAttributes = EMPTY_ATTRIBUTES
    is_remote: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "trace_state", freeze_attributes(self.trace_state))

    @property
    def is_valid(self) -> bool:
        return is_valid_trace_id(self.trace_id) and is_valid_span_id(self.span_id)

    @property
    def is_sampled(self) -> bool:
        return bool(self.trace_flags & SAMPLED_FLAG)

    @classmethod
    def invalid(cls) -> "SpanContext":
        """Return the shared invalid context."""
        return _INVALID_SPAN_CONTEXT


_INVALID_SPAN_CONTEXT = SpanContext(INVALID_TRACE_ID, INVALID_SPAN_ID)


class SpanKind(enum.Enum):
    """Relationship of a span to its remote parent and children."""

    INTERNAL = "internal"
    SERVER = "server"
    CLIENT = "client"
    PRODUCER = "producer"
    CONSUMER = "consumer"


class StatusCode(enum.Enum):
    UNSET = "unset"
    OK = "ok"
    ERROR = "error"


@dataclass(frozen=True)
class Status:
    """Final status of a span.

    Attributes:
        status_code: Outcome of the operation.
        description: Optional human readable detail, usually for errors.
    """

    status_code: StatusCode = StatusCode.UNSET
    description: str | None = None

    @property
    def is_ok(self) -> bool:
        return self.status_code is not StatusCode.ERROR

    @classmethod
    def unset(cls) -> "Status":
        return cls(StatusCode.UNSET)

    @classmethod
    def ok(cls) -> "Status":
        return cls(StatusCode.OK)

    @classmethod
    def error(cls, description: str | None = None) -> "Status":
        return cls(StatusCode.ERROR, description)


@dataclass(frozen=True)
class InstrumentationLibraryInfo:
    """Name and version of the library that produced the telemetry."""

    name: str
    version: str | None = None

    @classmethod
    def empty(cls) -> "InstrumentationLibraryInfo":
        return _EMPTY_LIBRARY_INFO


_EMPTY_LIBRARY_INFO = InstrumentationLibraryInfo("")


@dataclass(frozen=True)
class Resource:
    """Attributes describing the entity producing telemetry (host, service)."""

    attributes: FrozenAttributes = EMPTY_ATTRIBUTES

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", freeze_attributes(self.attributes))

    @classmethod
    def empty(cls) -> "Resource":
        return _EMPTY_RESOURCE


_EMPTY_RESOURCE = Resource()


@dataclass(frozen=True)
class MetricSample:
    """A single reading of one time series.

    Attributes:
        name: Instrument name (e.g., queue_depth).
        timestamp: Unix timestamp in seconds.
        value: The series value at collection time.
        labels: Label keys mapped to this series' label values.
    """

    name: str
    timestamp: float
    value: float
    labels: dict[str, str] = field(default_factory=dict)
