"""Failure reports: a structured side-channel notification, never a tool result."""

from __future__ import annotations

import logging

from planbook.events.models import FailureReportEvent
from planbook.events.sink import StructuredSink, send_structured

logger = logging.getLogger(__name__)


def send_failure_report(
    summary: str,
    *,
    requirements: str | None = None,
    problems: str | None = None,
    solutions: str | None = None,
    source_agent: str | None = None,
    sink: StructuredSink | None = None,
) -> None:
    """Emit a ``failure_report`` event stamped with the current time.

    Best effort: a failing sink is logged and otherwise ignored.
    """
    event = FailureReportEvent(
        summary=summary,
        requirements=requirements,
        problems=problems,
        solutions=solutions,
        source_agent=source_agent,
    )
    try:
        send_structured(event, sink)
    except Exception as e:
        logger.warning("Failed to send failure report: %s", e)
