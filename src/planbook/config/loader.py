"""Config discovery and loading.

Lookup order for the config file:

1. an explicit path (must exist)
2. ``$PLANBOOK_CONFIG``
3. ``<git root>/.planbook/config.yml``
4. built-in defaults

``$PLANBOOK_TASKS_DIR`` overrides ``paths.tasks`` from whichever source won.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from planbook.config.defaults import DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_FILENAME
from planbook.config.env_vars import EnvVar, get_env
from planbook.config.models import PlanbookConfig
from planbook.errors import ConfigError

logger = logging.getLogger(__name__)


def find_git_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` looking for a ``.git`` entry.

    Falls back to ``start`` (or the cwd) when no repository is found.
    """
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    return current


def find_config_path(
    override_path: str | Path | None = None,
    git_root: Path | None = None,
) -> Path | None:
    """Locate the config file, or return None to use defaults."""
    if override_path:
        path = Path(override_path).expanduser().resolve()
        if not path.is_file():
            raise ConfigError(f"Config file not found: {override_path}")
        return path

    env_path = get_env(EnvVar.CONFIG)
    if env_path:
        path = Path(env_path).expanduser().resolve()
        if path.is_file():
            return path
        logger.warning("%s points at missing file %s", EnvVar.CONFIG.value, env_path)

    root = git_root or find_git_root()
    default_path = root / DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILENAME
    if default_path.is_file():
        return default_path
    return None


def load_config(config_path: Path | None) -> PlanbookConfig:
    """Load and validate a config file; None yields the defaults."""
    if config_path is None:
        logger.debug("No config file found, using defaults")
        config = PlanbookConfig()
    else:
        logger.debug("Loading configuration from %s", config_path)
        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read config {config_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"Invalid configuration in {config_path}: expected a mapping")
        try:
            config = PlanbookConfig.model_validate(raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e

    tasks_override = get_env(EnvVar.TASKS_DIR)
    if tasks_override:
        config.paths.tasks = tasks_override
    return config


def load_effective_config(
    override_path: str | Path | None = None,
    git_root: Path | None = None,
) -> tuple[PlanbookConfig, Path | None]:
    """Find and load the config; returns it with the path it came from."""
    config_path = find_config_path(override_path, git_root)
    return load_config(config_path), config_path
