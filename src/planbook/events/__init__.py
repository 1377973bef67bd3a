"""Structured events emitted alongside tool results."""

from planbook.events.models import FailureReportEvent, StructuredEvent
from planbook.events.sink import (
    StructuredSink,
    get_structured_sink,
    log_sink,
    send_structured,
    set_structured_sink,
)

__all__ = [
    "FailureReportEvent",
    "StructuredEvent",
    "StructuredSink",
    "get_structured_sink",
    "log_sink",
    "send_structured",
    "set_structured_sink",
]
