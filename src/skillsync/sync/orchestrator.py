"""Sync orchestration: resolve targets, project each, collect outcomes.

``run(requested, config)`` accepts one target name or ``"all"``.

- A single target is resolved, projected, and reported. Its fatal error
  becomes the report's only outcome; nothing else is attempted.
- ``"all"`` detects installed tools first. With none detected the run
  reports "nothing to do" and writes nothing. Otherwise every detected
  target is projected in canonical order; a failing target is recorded
  and the run continues with the next one.

The secrets advisory is computed before any projection and never
influences what is written.
"""

from __future__ import annotations

import logging
from pathlib import Path

from skillsync.discovery import ToolDetector
from skillsync.exceptions import SkillSyncError, UnknownTargetError
from skillsync.parsers.models import ClaudeHomeConfig
from skillsync.sync.models import SyncReport, TargetOutcome
from skillsync.sync.secrets import sensitive_env_keys
from skillsync.targets.registry import (
    ALL_TARGETS,
    VALID_TARGETS,
    get_projector,
    resolve_output_root,
)

logger = logging.getLogger(__name__)


class SyncOrchestrator:
    """Runs projectors for requested or detected targets.

    Usage::

        orchestrator = SyncOrchestrator()
        report = orchestrator.run("all", load_claude_home())
        for outcome in report.outcomes:
            print(outcome.name, outcome.ok)

    Args:
        home: Home directory for output roots and detection. Defaults to
            the current user's home.
        cwd: Working directory for project-scoped targets. Defaults to
            the process working directory.
        detector: Tool detector used for ``"all"``.
    """

    def __init__(
        self,
        home: Path | None = None,
        cwd: Path | None = None,
        detector: ToolDetector | None = None,
    ) -> None:
        self.home = home if home is not None else Path.home()
        self.cwd = cwd if cwd is not None else Path.cwd()
        self.detector = detector or ToolDetector()

    def run(self, requested: str, config: ClaudeHomeConfig) -> SyncReport:
        """Sync ``config`` into the requested target(s).

        Raises:
            UnknownTargetError: If ``requested`` is not a valid selector.
        """
        if requested not in VALID_TARGETS:
            raise UnknownTargetError(requested, list(VALID_TARGETS))

        report = SyncReport(requested=requested)
        report.sensitive_keys = sensitive_env_keys(config.mcp_servers)
        report.secrets_warning = bool(report.sensitive_keys)
        if report.secrets_warning:
            logger.warning(
                "MCP server env vars may contain secrets: %s",
                ", ".join(report.sensitive_keys),
            )

        if requested != ALL_TARGETS:
            report.outcomes.append(self.sync_target(requested, config))
            return report

        report.detections = self.detector.detect(home=self.home, cwd=self.cwd)
        active = [t.name for t in report.detections if t.detected]
        if not active:
            logger.info("No AI coding tools detected; nothing to sync")
            return report

        for name in active:
            report.outcomes.append(self.sync_target(name, config))
        return report

    def sync_target(self, name: str, config: ClaudeHomeConfig) -> TargetOutcome:
        """Project into one target, capturing its fatal error if any."""
        output_root = resolve_output_root(name, self.home, self.cwd)
        outcome = TargetOutcome(name=name, output_root=output_root)
        try:
            result = get_projector(name).project(config, output_root)
        except SkillSyncError as exc:
            logger.error("Sync to %s failed: %s", name, exc)
            outcome.error = exc
            return outcome

        outcome.skills_linked = result.skills_linked
        outcome.settings_path = result.settings_path
        return outcome
