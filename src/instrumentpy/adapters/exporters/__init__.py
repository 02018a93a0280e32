"""Span exporters that keep spans in-process."""

from instrumentpy.adapters.exporters.in_memory import InMemorySpanExporter
from instrumentpy.adapters.exporters.logging import LoggingSpanExporter

__all__ = [
    "InMemorySpanExporter",
    "LoggingSpanExporter",
]
