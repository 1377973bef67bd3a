"""Exception types raised by planbook."""

from __future__ import annotations


class PlanbookError(Exception):
    """Base class for all planbook errors."""


class ConfigError(PlanbookError):
    """Raised when a configuration file is missing or invalid."""


class PlanError(PlanbookError):
    """Base class for plan store and resolution errors."""


class PlanNotFoundError(PlanError):
    """Raised when no plan matches an identifier."""

    def __init__(self, message: str, identifier: str | None = None) -> None:
        super().__init__(message)
        self.identifier = identifier


class AmbiguousPlanError(PlanError):
    """Raised when an identifier without a path qualifier matches several plans."""

    def __init__(self, identifier: str, candidates: list[str]) -> None:
        self.identifier = identifier
        self.candidates = candidates
        listed = ", ".join(candidates)
        super().__init__(
            f"Plan identifier '{identifier}' is ambiguous; matches: {listed}"
        )


class PlanFileError(PlanError):
    """Raised when a plan file cannot be read or does not validate."""


class PlanValidationError(PlanError):
    """Raised when tool input would produce an invalid plan."""
