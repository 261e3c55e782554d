"""Result types produced by ``SyncOrchestrator``."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from skillsync.discovery.models import DetectedTool
from skillsync.exceptions import SkillSyncError


@dataclass
class TargetOutcome:
    """Outcome of projecting into a single target.

    Attributes:
        name: Target identifier.
        output_root: Root the target was projected into.
        error: The fatal error for this target, or None on success.
        skills_linked: Skill links in place after the run.
        settings_path: Settings file written or refreshed, if any.
    """

    name: str
    output_root: Path
    error: SkillSyncError | None = None
    skills_linked: int = 0
    settings_path: Path | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SyncReport:
    """Aggregate result of one ``run`` call.

    Attributes:
        requested: The selector as given (a target name or ``"all"``).
        detections: Detection results; only filled for ``"all"``.
        outcomes: Per-target outcomes in execution order.
        secrets_warning: True when MCP env vars look like secrets.
        sensitive_keys: The ``server.ENV`` names behind the warning.
    """

    requested: str
    detections: list[DetectedTool] = field(default_factory=list)
    outcomes: list[TargetOutcome] = field(default_factory=list)
    secrets_warning: bool = False
    sensitive_keys: list[str] = field(default_factory=list)

    @property
    def nothing_to_do(self) -> bool:
        """True when ``"all"`` was requested and no tool was detected."""
        return not self.outcomes and not any(t.detected for t in self.detections)

    @property
    def failures(self) -> list[TargetOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        """True when every attempted target succeeded."""
        return not self.failures
