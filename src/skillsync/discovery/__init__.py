"""Detection of installed AI coding tools.

Public API::

    from skillsync.discovery import detect_installed_tools

    for tool in detect_installed_tools():
        print(f"{tool.name}: {tool.reason}")
"""

from __future__ import annotations

from skillsync.discovery.detector import (
    ToolDetector,
    detect_installed_tools,
    get_detected_target_names,
)
from skillsync.discovery.models import DetectedTool
from skillsync.discovery.tool_registry import (
    TOOL_NAMES,
    TOOL_PROFILES,
    MarkerPath,
    ToolProfile,
)

__all__ = [
    "DetectedTool",
    "MarkerPath",
    "TOOL_NAMES",
    "TOOL_PROFILES",
    "ToolDetector",
    "ToolProfile",
    "detect_installed_tools",
    "get_detected_target_names",
]
