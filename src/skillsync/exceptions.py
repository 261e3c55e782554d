"""skillsync exception hierarchy.

All public exceptions inherit from SkillSyncError, giving callers a single
base class to catch when they want to handle any sync failure for one
target without swallowing unrelated errors.
"""

from __future__ import annotations

from pathlib import Path


class SkillSyncError(Exception):
    """Base exception for all skillsync errors."""


class UnknownTargetError(SkillSyncError):
    """Raised when a sync target selector is not one of the known names.

    Raised before any projection work begins.
    """

    def __init__(self, target: str, valid: list[str]) -> None:
        self.target = target
        self.valid = list(valid)
        super().__init__(
            f"Unknown target: {target}. Use one of: {', '.join(self.valid)}"
        )


class SettingsParseError(SkillSyncError):
    """Raised when an existing settings file is not valid structured data.

    The file is left untouched; only the owning target's projection fails.
    """

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Cannot parse existing settings {path}: {detail}")


class SkillLinkConflictError(SkillSyncError):
    """Raised when a regular file or directory occupies a skill link path."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Refusing to replace {path}: it exists and is not a symlink"
        )


class DuplicateSkillNameError(SkillSyncError):
    """Raised when two skills in one config share the same name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate skill name: {name}")


class FilesystemError(SkillSyncError):
    """Raised for permission or I/O failures during projection.

    Carries the failed operation and path so reports can say what broke.
    """

    def __init__(self, operation: str, path: Path, cause: OSError) -> None:
        self.operation = operation
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{operation} failed for {path}: {reason}")


class SettingsEncodeError(SkillSyncError):
    """Raised when merged settings cannot be rendered in the file's format.

    For example a ``null`` server field headed for TOML. Nothing is written.
    """

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Cannot encode settings for {path}: {detail}")
