"""Target projectors: skill links and merged MCP settings per tool.

Public API::

    from skillsync.targets import get_projector, resolve_output_root

    root = resolve_output_root("gemini", home, cwd)
    get_projector("gemini").project(config, root)
"""

from __future__ import annotations

from skillsync.targets.base import (
    McpSchema,
    ProjectionResult,
    TargetProfile,
    TargetProjector,
)
from skillsync.targets.merge import (
    JsonCodec,
    SettingsCodec,
    TomlCodec,
    merge_settings,
    write_merged_settings,
)
from skillsync.targets.registry import (
    ALL_TARGETS,
    TARGET_NAMES,
    TARGET_PROFILES,
    VALID_TARGETS,
    get_profile,
    get_projector,
    resolve_output_root,
)

__all__ = [
    "ALL_TARGETS",
    "JsonCodec",
    "McpSchema",
    "ProjectionResult",
    "SettingsCodec",
    "TARGET_NAMES",
    "TARGET_PROFILES",
    "TargetProfile",
    "TargetProjector",
    "TomlCodec",
    "VALID_TARGETS",
    "get_profile",
    "get_projector",
    "merge_settings",
    "resolve_output_root",
    "write_merged_settings",
]
