"""Immutable snapshots of finished spans and the builder that produces them.

The tracing runtime fills a SpanDataBuilder once per finished span and hands
the built SpanData to an exporter. Every collection is copied into a frozen
container at build time; unset collections resolve to shared empty
instances. Attribute counts are taken from the caller as-is and are never
derived from, or checked against, the stored attributes.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any

from instrumentpy.core.errors import IncompleteSpanDataError
from instrumentpy.core.frozen import (
    EMPTY_ATTRIBUTES,
    EMPTY_LIST,
    AttributeValue,
    FrozenAttributes,
    FrozenList,
    freeze_attributes,
    freeze_list,
)
from instrumentpy.core.models import (
    INVALID_SPAN_ID,
    InstrumentationLibraryInfo,
    Resource,
    SpanContext,
    SpanKind,
    Status,
    is_valid_span_id,
)


@dataclass(frozen=True)
class Event:
    """A timestamped annotation recorded on a span.

    Attributes:
        epoch_nanos: Event time in nanoseconds since the Unix epoch.
        name: Event name.
        attributes: Attributes kept on the event.
        total_attribute_count: Attributes recorded before any limit applied.
    """

    epoch_nanos: int
    name: str
    attributes: FrozenAttributes = EMPTY_ATTRIBUTES
    total_attribute_count: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", freeze_attributes(self.attributes))

    @classmethod
    def create(
        cls,
        epoch_nanos: int,
        name: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        total_attribute_count: int = 0,
    ) -> "Event":
        return cls(epoch_nanos, name, freeze_attributes(attributes), total_attribute_count)


@dataclass(frozen=True)
class Link:
    """A reference from a span to another span, possibly in another trace.

    Attributes:
        span_context: Context of the linked span.
        attributes: Attributes kept on the link.
        total_attribute_count: Attributes recorded before any limit applied.
    """

    span_context: SpanContext
    attributes: FrozenAttributes = EMPTY_ATTRIBUTES
    total_attribute_count: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", freeze_attributes(self.attributes))

    @classmethod
    def create(
        cls,
        span_context: SpanContext,
        attributes: Mapping[str, AttributeValue] | None = None,
        total_attribute_count: int = 0,
    ) -> "Link":
        return cls(span_context, freeze_attributes(attributes), total_attribute_count)


@dataclass(frozen=True)
class SpanData:
    """Immutable record of a finished span, ready for export.

    Collections passed in are copied into frozen containers, whether the
    record comes from SpanDataBuilder, the constructor or dataclasses.replace.
    Collection fields are read-only: mutating ``attributes``, ``events`` or
    ``links`` raises UnsupportedMutationError. ``total_recorded_events``,
    ``total_recorded_links`` and ``total_attribute_count`` count what was
    recorded before truncation, so they may exceed the stored sizes.
    """

    trace_id: str
    span_id: str
    name: str
    kind: SpanKind
    status: Status
    start_epoch_nanos: int
    end_epoch_nanos: int
    has_ended: bool
    trace_flags: int = 0
    trace_state: FrozenAttributes = EMPTY_ATTRIBUTES
    parent_span_id: str = INVALID_SPAN_ID
    resource: Resource = Resource.empty()
    instrumentation_library_info: InstrumentationLibraryInfo = (
        InstrumentationLibraryInfo.empty()
    )
    attributes: FrozenAttributes = EMPTY_ATTRIBUTES
    events: FrozenList = EMPTY_LIST
    links: FrozenList = EMPTY_LIST
    has_remote_parent: bool = False
    total_recorded_events: int = 0
    total_recorded_links: int = 0
    total_attribute_count: int = 0

    def __post_init__(self) -> None:
        for name in ("attributes", "trace_state"):
            object.__setattr__(self, name, freeze_attributes(getattr(self, name)))
        for name in ("events", "links"):
            object.__setattr__(self, name, freeze_list(getattr(self, name)))

    @property
    def span_context(self) -> SpanContext:
        return SpanContext(
            self.trace_id, self.span_id, self.trace_flags, self.trace_state
        )

    @property
    def has_valid_parent(self) -> bool:
        return is_valid_span_id(self.parent_span_id)

    @property
    def duration_nanos(self) -> int:
        return self.end_epoch_nanos - self.start_epoch_nanos

    @staticmethod
    def builder() -> "SpanDataBuilder":
        return SpanDataBuilder()

    def to_builder(self) -> "SpanDataBuilder":
        """Return a builder pre-filled with this snapshot's fields."""
        builder = SpanDataBuilder()
        builder._fields.update(
            {f.name: getattr(self, f.name) for f in fields(self)}
        )
        return builder


_REQUIRED_FIELDS = (
    "trace_id",
    "span_id",
    "name",
    "kind",
    "status",
    "start_epoch_nanos",
    "end_epoch_nanos",
    "has_ended",
)


class SpanDataBuilder:
    """Accumulates span fields and builds immutable SpanData snapshots.

    Setters return the builder so calls can be chained. ``build`` may be
    called repeatedly; each call returns an independent snapshot of the
    builder's current state.

    Example:
        ```python
        span = (
            SpanData.builder()
            .set_trace_id(trace_id)
            .set_span_id(span_id)
            .set_name("GET /orders")
            .set_kind(SpanKind.SERVER)
            .set_status(Status.ok())
            .set_start_epoch_nanos(start)
            .set_end_epoch_nanos(end)
            .set_has_ended(True)
            .build()
        )
        ```
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> "SpanDataBuilder":
        self._fields[name] = value
        return self

    def set_trace_id(self, trace_id: str) -> "SpanDataBuilder":
        return self._set("trace_id", trace_id)

    def set_span_id(self, span_id: str) -> "SpanDataBuilder":
        return self._set("span_id", span_id)

    def set_trace_flags(self, trace_flags: int) -> "SpanDataBuilder":
        return self._set("trace_flags", trace_flags)

    def set_trace_state(
        self, trace_state: Mapping[str, str] | None
    ) -> "SpanDataBuilder":
        return self._set("trace_state", trace_state)

    def set_parent_span_id(self, parent_span_id: str) -> "SpanDataBuilder":
        return self._set("parent_span_id", parent_span_id)

    def set_resource(self, resource: Resource) -> "SpanDataBuilder":
        return self._set("resource", resource)

    def set_instrumentation_library_info(
        self, info: InstrumentationLibraryInfo
    ) -> "SpanDataBuilder":
        return self._set("instrumentation_library_info", info)

    def set_name(self, name: str) -> "SpanDataBuilder":
        return self._set("name", name)

    def set_kind(self, kind: SpanKind) -> "SpanDataBuilder":
        return self._set("kind", kind)

    def set_status(self, status: Status) -> "SpanDataBuilder":
        return self._set("status", status)

    def set_start_epoch_nanos(self, epoch_nanos: int) -> "SpanDataBuilder":
        return self._set("start_epoch_nanos", epoch_nanos)

    def set_end_epoch_nanos(self, epoch_nanos: int) -> "SpanDataBuilder":
        return self._set("end_epoch_nanos", epoch_nanos)

    def set_attributes(
        self, attributes: Mapping[str, AttributeValue] | None
    ) -> "SpanDataBuilder":
        return self._set("attributes", attributes)

    def set_events(self, events: Iterable[Event] | None) -> "SpanDataBuilder":
        return self._set("events", events)

    def set_links(self, links: Iterable[Link] | None) -> "SpanDataBuilder":
        return self._set("links", links)

    def set_has_remote_parent(self, has_remote_parent: bool) -> "SpanDataBuilder":
        return self._set("has_remote_parent", has_remote_parent)

    def set_has_ended(self, has_ended: bool) -> "SpanDataBuilder":
        return self._set("has_ended", has_ended)

    def set_total_recorded_events(self, count: int) -> "SpanDataBuilder":
        return self._set("total_recorded_events", count)

    def set_total_recorded_links(self, count: int) -> "SpanDataBuilder":
        return self._set("total_recorded_links", count)

    def set_total_attribute_count(self, count: int) -> "SpanDataBuilder":
        return self._set("total_attribute_count", count)

    def build(self) -> SpanData:
        """Snapshot the accumulated fields into a SpanData.

        Raises:
            IncompleteSpanDataError: If any required field was never set.
        """
        missing = [name for name in _REQUIRED_FIELDS if name not in self._fields]
        if missing:
            raise IncompleteSpanDataError(missing)

        return SpanData(**self._fields)
