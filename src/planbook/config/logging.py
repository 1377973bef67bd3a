# planbook/config/logging.py
"""
Logging setup for the planbook CLI.

Plan details and research notes are free text pasted in by people and
agents; tokens end up in them and then in debug output. Every handler
installed here carries the redacting filter.
"""

from __future__ import annotations

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from planbook.config.defaults import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAX_BYTES,
)
from planbook.config.enums import LogFormat

PLANBOOK_LOGGER = "planbook"

_CONSOLE_FORMATS: dict[str, str] = {
    LogFormat.SIMPLE.value: "%(levelname)-8s %(message)s",
    LogFormat.DETAILED.value: (
        "%(asctime)s [%(levelname)-8s] %(name)s:%(lineno)d - %(message)s"
    ),
    LogFormat.JSON.value: (
        '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
        '"logger": "%(name)s", "message": "%(message)s"}'
    ),
}

# File logs are always JSON lines, one per record
_FILE_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "line": %(lineno)d, "message": "%(message)s"}'
)


# ── Redaction ────────────────────────────────────────────────────────────────

_SECRET_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(Bearer\s+)\S+", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"\bsk-[A-Za-z0-9_-]{10,}\b"), "[REDACTED_API_KEY]"),
    (re.compile(r"\b(?:gh[pousr]_|github_pat_)[A-Za-z0-9_]{16,}\b"), "[REDACTED_TOKEN]"),
    (re.compile(r"\bglpat-[A-Za-z0-9_-]{20,}\b"), "[REDACTED_TOKEN]"),
    (
        re.compile(r"((?:api[_-]?key|password|secret)\s*[=:]\s*)['\"]?\S+['\"]?", re.IGNORECASE),
        r"\1[REDACTED]",
    ),
]


def redact(text: str) -> str:
    """Replace anything that looks like a credential in ``text``."""
    for pattern, replacement in _SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


class SecretRedactingFilter(logging.Filter):
    """Redacts credentials from the fully formatted message.

    Args are merged into ``msg`` first, so secrets passed as ``%s``
    arguments are caught as well.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            record.msg = redact(record.getMessage())
            record.args = None
        elif isinstance(record.msg, str):
            record.msg = redact(record.msg)
        return True


secret_filter = SecretRedactingFilter()


# ── Setup ────────────────────────────────────────────────────────────────────


def resolve_log_level(level: str, quiet: bool = False, verbose: bool = False) -> int:
    """Numeric level from the CLI flags; ``quiet`` beats ``verbose``."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    quiet: bool = False,
    verbose: bool = False,
    log_format: LogFormat | str = LogFormat.SIMPLE,
    log_file: str | None = None,
) -> None:
    """
    Configure logging for one planbook invocation.

    Replaces any handlers already on the root logger.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        quiet: Only errors reach the console
        verbose: Debug output on the console
        log_format: Console format, one of ``LogFormat``
        log_file: Also write DEBUG records to this rotating JSON log.
                  ``~`` is expanded and parent directories are created.

    Raises:
        ValueError: Unknown level or format.
    """
    log_level = resolve_log_level(level, quiet, verbose)
    try:
        fmt = _CONSOLE_FORMATS[LogFormat(log_format).value]
    except ValueError as e:
        raise ValueError(f"Invalid log format: {log_format}") from e

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(fmt))
    console.setLevel(log_level)
    console.addFilter(secret_filter)
    root.addHandler(console)
    root.setLevel(log_level)

    if log_level > logging.DEBUG:
        logging.getLogger("asyncio").setLevel(logging.ERROR)

    planbook_logger = logging.getLogger(PLANBOOK_LOGGER)
    if log_file:
        root.addHandler(_rotating_file_handler(log_file))
        # The console handler keeps filtering at log_level
        root.setLevel(logging.DEBUG)
        planbook_logger.setLevel(logging.DEBUG)
    else:
        planbook_logger.setLevel(log_level)


def _rotating_file_handler(log_file: str) -> RotatingFileHandler:
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        path,
        maxBytes=DEFAULT_LOG_MAX_BYTES,
        backupCount=DEFAULT_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    handler.addFilter(secret_filter)
    return handler
