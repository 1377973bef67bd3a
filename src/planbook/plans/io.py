"""Reading and writing plan files.

Two on-disk formats are accepted:

- pure YAML (``.yml`` / ``.yaml``), every field in the document
- markdown with YAML front matter (``.plan.md`` / ``.md``), where the
  markdown body becomes the plan's ``details``

Writes always produce the front matter form.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from planbook.config.defaults import (
    DEFAULT_PLAN_SLUG_MAX_CHARS,
    FRONT_MATTER_DELIMITER,
    PLAN_FILE_SUFFIX,
)
from planbook.errors import PlanFileError
from planbook.plans.models import PlanRecord

logger = logging.getLogger(__name__)

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def slugify(title: str, max_chars: int = DEFAULT_PLAN_SLUG_MAX_CHARS) -> str:
    """Lowercase, dash-separated slug of at most ``max_chars`` characters."""
    slug = _NON_SLUG_CHARS.sub("-", title.lower()).strip("-")
    return slug[:max_chars].strip("-")


def generate_plan_filename(plan_id: int, title: str) -> str:
    """File name for a new plan, e.g. ``42-add-feature-x.plan.md``."""
    return f"{plan_id}-{slugify(title)}{PLAN_FILE_SUFFIX}"


def split_front_matter(content: str) -> tuple[str | None, str]:
    """Split ``content`` into (front matter YAML, body).

    Returns ``(None, content)`` when the text does not open with a
    front matter delimiter line. Only an unindented delimiter closes the
    block; indented ones are continuation lines of multi-line scalars.
    """
    lines = content.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != FRONT_MATTER_DELIMITER:
        return None, content

    for i in range(1, len(lines)):
        if lines[i].rstrip() == FRONT_MATTER_DELIMITER:
            front = "".join(lines[1:i])
            body = "".join(lines[i + 1 :])
            return front, body

    # Unterminated front matter: treat the whole thing as YAML
    return "".join(lines[1:]), ""


def parse_plan_text(content: str, source: Path | str = "<string>") -> PlanRecord:
    """Parse plan text in either supported format."""
    front, body = split_front_matter(content)
    try:
        raw = yaml.safe_load(front if front is not None else content)
    except yaml.YAMLError as e:
        raise PlanFileError(f"Invalid YAML in plan {source}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise PlanFileError(f"Plan {source} does not contain a YAML mapping")

    data: dict[str, Any] = dict(raw)
    body = body.strip()
    if front is not None and body:
        existing = data.get("details")
        data["details"] = f"{existing}\n\n{body}" if existing else body

    try:
        return PlanRecord.model_validate(data)
    except ValidationError as e:
        raise PlanFileError(f"Plan {source} failed validation:\n{e}") from e


def read_plan_file(path: Path) -> PlanRecord:
    """Read and validate a single plan file."""
    logger.debug("Reading plan file: %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PlanFileError(f"Could not read plan file {path}: {e}") from e
    return parse_plan_text(content, path)


def render_plan_text(plan: PlanRecord) -> str:
    """Render a plan in front matter form."""
    data = plan.to_file_dict()
    details = data.pop("details", None)
    front = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    text = f"{FRONT_MATTER_DELIMITER}\n{front}{FRONT_MATTER_DELIMITER}\n"
    if details:
        text += f"\n{details.rstrip()}\n"
    return text


def write_plan_file(
    path: Path,
    plan: PlanRecord,
    *,
    skip_updated_at: bool = False,
) -> PlanRecord:
    """Write ``plan`` to ``path`` and return the record as written.

    ``updatedAt`` is refreshed unless ``skip_updated_at`` is set; a
    missing ``createdAt`` is filled in.
    """
    now = utc_now_iso()
    updates: dict[str, Any] = {}
    if not plan.created_at:
        updates["created_at"] = now
    if not skip_updated_at:
        updates["updated_at"] = now
    written = plan.model_copy(update=updates) if updates else plan

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_plan_text(written), encoding="utf-8")
    except OSError as e:
        raise PlanFileError(f"Could not write plan file {path}: {e}") from e
    logger.debug("Wrote plan %s to %s", written.id, path)
    return written
