# planbook/planning/resolver.py
"""Plan resolution: identifier in, (plan, path) out.

User input is loosely typed (a numeric id, a slug, or a file path). It
is turned into a tagged ``ById`` / ``ByPath`` identifier once, at the
boundary, by ``parse_plan_identifier``; ``resolve_plan`` then handles
each variant explicitly.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from planbook.config.defaults import PLAN_FILE_EXTENSIONS, PLAN_FILE_SUFFIX
from planbook.errors import AmbiguousPlanError, PlanNotFoundError
from planbook.planning.context import PlanningContext
from planbook.plans.models import ById, ByPath, PlanSummary, ResolvedPlan

logger = logging.getLogger(__name__)

_ID_PREFIXED_STEM = re.compile(r"^\d+-(?P<slug>.+)$")
_PATH_HINTS = ("/", "\\", ".")


def parse_plan_identifier(raw: str | int, cwd: Path) -> ById | ByPath:
    """Classify raw user input as an id/slug or a file path.

    - an existing file (relative to ``cwd`` or absolute) is a path
    - anything containing a separator or a dot is a path, even if missing
    - everything else is an id or slug
    """
    if isinstance(raw, int):
        return ById(value=str(raw))

    text = raw.strip()
    if not text:
        raise PlanNotFoundError("Plan ID or file path is required", identifier=raw)

    candidate = Path(text).expanduser()
    if not candidate.is_absolute():
        candidate = cwd / candidate

    if candidate.is_file():
        return ByPath(path=candidate.resolve(), raw=text)
    if any(hint in text for hint in _PATH_HINTS):
        return ByPath(path=candidate, raw=text)
    return ById(value=text)


def plan_slug(path: Path) -> str:
    """Slug portion of a plan file name (``42-add-auth.plan.md`` -> ``add-auth``)."""
    stem = _bare_stem(path)
    match = _ID_PREFIXED_STEM.match(stem)
    return match.group("slug") if match else stem


def _bare_stem(path: Path) -> str:
    name = path.name
    for suffix in (PLAN_FILE_SUFFIX, *PLAN_FILE_EXTENSIONS):
        if name.endswith(suffix):
            return name[: -len(suffix)]
    return path.stem


def _match_by_id(identifier: ById, plans: list[PlanSummary]) -> list[PlanSummary]:
    value = identifier.value
    if value.isdigit():
        wanted = int(value)
        return [p for p in plans if p.id == wanted]

    wanted_slug = value.lower()
    return [
        p
        for p in plans
        if plan_slug(p.filename).lower() == wanted_slug
        or _bare_stem(p.filename).lower() == wanted_slug
    ]


async def resolve_plan(
    identifier: ById | ByPath | str | int,
    context: PlanningContext,
) -> ResolvedPlan:
    """Load exactly one plan for ``identifier``.

    Raises:
        PlanNotFoundError: nothing matches.
        AmbiguousPlanError: an id or slug matches more than one plan file.
        PlanFileError: the matched file cannot be parsed.
    """
    if not isinstance(identifier, (ById, ByPath)):
        identifier = parse_plan_identifier(identifier, context.cwd)

    if isinstance(identifier, ByPath):
        if not identifier.path.is_file():
            raise PlanNotFoundError(
                f"Plan file not found: {identifier.raw}", identifier=identifier.raw
            )
        plan_path = identifier.path.resolve()
        logger.debug("Resolved plan by path: %s", plan_path)
        return ResolvedPlan(plan=context.store.read(plan_path), plan_path=plan_path)

    matches = _match_by_id(identifier, context.store.all_plans())
    if not matches:
        raise PlanNotFoundError(
            f"No plan found with ID or file path: {identifier.value}",
            identifier=identifier.value,
        )
    if len(matches) > 1:
        raise AmbiguousPlanError(
            identifier.value,
            [context.relative_path(m.filename) for m in matches],
        )

    plan_path = matches[0].filename
    logger.debug("Resolved plan %s to %s", identifier.value, plan_path)
    return ResolvedPlan(plan=context.store.read(plan_path), plan_path=plan_path)
