"""Structured event sink.

``send_structured`` hands an event to a sink. The process default writes
one JSON line per event to the ``planbook.events`` logger; hosts that
forward events elsewhere install their own with ``set_structured_sink``
or pass ``sink=`` per call.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable

from planbook.config.defaults import STRUCTURED_EVENTS_LOGGER
from planbook.events.models import StructuredEvent

StructuredSink = Callable[[StructuredEvent], None]
"""Receives each event; return value is ignored."""

events_logger = logging.getLogger(STRUCTURED_EVENTS_LOGGER)


def log_sink(event: StructuredEvent) -> None:
    """Default sink: serialize to JSON and log at INFO."""
    events_logger.info(json.dumps(event.to_payload(), default=str))


_default_sink: StructuredSink = log_sink


def set_structured_sink(sink: StructuredSink | None) -> StructuredSink:
    """Install the process default sink; None restores ``log_sink``.

    Returns the previously installed sink so callers can restore it.
    """
    global _default_sink
    previous = _default_sink
    _default_sink = sink or log_sink
    return previous


def get_structured_sink() -> StructuredSink:
    return _default_sink


def send_structured(event: StructuredEvent, sink: StructuredSink | None = None) -> None:
    """Deliver ``event`` to ``sink`` or the process default."""
    (sink or _default_sink)(event)
