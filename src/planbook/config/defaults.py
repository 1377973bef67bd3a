"""Default configuration values - no magic numbers!

All default values should be defined here, not hardcoded in the code.
"""

from __future__ import annotations


# ================================================================
# Config Discovery
# ================================================================

DEFAULT_CONFIG_DIR = ".planbook"
"""Directory (relative to the git root) holding the project config."""

DEFAULT_CONFIG_FILENAME = "config.yml"
"""Config file name inside DEFAULT_CONFIG_DIR."""


# ================================================================
# Plan Files
# ================================================================

PLAN_FILE_SUFFIX = ".plan.md"
"""Suffix used when writing new plan files."""

PLAN_FILE_EXTENSIONS = (".yml", ".yaml", ".md")
"""Extensions scanned when reading a tasks directory."""

FRONT_MATTER_DELIMITER = "---"
"""Line that opens and closes YAML front matter."""

DEFAULT_PLAN_SLUG_MAX_CHARS = 50
"""Maximum slug length in generated plan filenames."""

DEFAULT_RESEARCH_HEADING = "## Research"
"""Heading research notes are appended under."""

GENERATED_SECTION_START = "<!-- planbook-generated-start -->"
"""Opens the tool-managed part of a plan's details."""

GENERATED_SECTION_END = "<!-- planbook-generated-end -->"
"""Closes the tool-managed part of a plan's details."""


# ================================================================
# Messages
# ================================================================

RETRIEVED_PLAN_MESSAGE = "Retrieved plan"
"""Summary message for get-plan; suffixed with the id when present."""


# ================================================================
# Logging Defaults
# ================================================================

DEFAULT_LOG_LEVEL = "WARNING"
"""Default console log level."""

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024
"""Rotate the log file after 10 MB."""

DEFAULT_LOG_BACKUP_COUNT = 3
"""Keep this many rotated log files."""

STRUCTURED_EVENTS_LOGGER = "planbook.events"
"""Logger name the default structured sink writes to."""
