"""Detection of installed AI coding tools from marker paths.

Powers ``skillsync sync all``: only tools that appear to be installed on
this machine (or in this project) are synced.

Detection Algorithm:
    For each ``ToolProfile`` in canonical order, probe its marker paths in
    order. The first existing path marks the tool as detected and becomes
    the reported reason. Absence, missing parents, and permission errors
    are all ordinary "not found" outcomes; detection never raises and
    never touches the filesystem beyond ``stat``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from skillsync.discovery.models import NOT_FOUND, DetectedTool
from skillsync.discovery.tool_registry import TOOL_PROFILES, ToolProfile

logger = logging.getLogger(__name__)


def _path_exists(path: Path) -> bool:
    try:
        return path.exists()
    except (PermissionError, OSError):
        logger.debug("Cannot stat marker %s", path, exc_info=True)
        return False


class ToolDetector:
    """Checks known tool profiles against a home and working directory.

    Usage::

        detector = ToolDetector()
        for tool in detector.detect():
            print(tool.name, tool.detected, tool.reason)
    """

    def __init__(self, profiles: tuple[ToolProfile, ...] = TOOL_PROFILES) -> None:
        self.profiles = profiles

    def _get_roots(
        self, home: Path | None, cwd: Path | None,
    ) -> tuple[Path, Path]:
        """Resolve the roots to probe, defaulting to the process values."""
        return (
            home if home is not None else Path.home(),
            cwd if cwd is not None else Path.cwd(),
        )

    def probe(self, profile: ToolProfile, home: Path, cwd: Path) -> DetectedTool:
        """Probe a single tool profile against the given roots."""
        for marker in profile.markers:
            candidate = marker.resolve(home, cwd)
            if _path_exists(candidate):
                return DetectedTool(profile.name, True, f"found {candidate}")
        return DetectedTool(profile.name, False, NOT_FOUND)

    def detect(
        self, home: Path | None = None, cwd: Path | None = None,
    ) -> list[DetectedTool]:
        """Detect every known tool.

        Args:
            home: Override the home directory (for testing).
            cwd: Override the working directory (for testing).

        Returns:
            One ``DetectedTool`` per profile, in canonical order.
        """
        home_dir, cwd_dir = self._get_roots(home, cwd)
        return [self.probe(p, home_dir, cwd_dir) for p in self.profiles]


def detect_installed_tools(
    home: Path | None = None, cwd: Path | None = None,
) -> list[DetectedTool]:
    """Detect all known tools with the default profiles."""
    return ToolDetector().detect(home=home, cwd=cwd)


def get_detected_target_names(
    home: Path | None = None, cwd: Path | None = None,
) -> list[str]:
    """Return the names of detected tools, canonical order preserved."""
    return [t.name for t in detect_installed_tools(home, cwd) if t.detected]
