"""Exceptions raised while resolving, rendering and emitting a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure that aborts a scaffolding run."""


class MissingRequiredFieldError(ScaffoldError):
    """Raised when a required request field was not supplied."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidFieldError(ScaffoldError):
    """Raised when a supplied field is not a well-formed identifier."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class ScaffoldIOError(ScaffoldError):
    """Raised when a filesystem operation on the target tree fails."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class TargetExistsError(ScaffoldIOError):
    """Raised when the target directory already has content and ``force`` is off."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "directory exists and is not empty (use --force to overwrite)")
