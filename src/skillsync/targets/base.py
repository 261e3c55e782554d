"""Shared projector contract and per-target configuration records.

Every target is described by a ``TargetProfile``: where its output tree
lives, which settings file carries MCP servers, the container key inside
that file, the file format, and an ``McpSchema`` that reshapes one Claude
MCP server entry into the target's schema. A single ``TargetProjector``
class materializes any profile, so adding a target is a data change.

Projection steps:
    1. Create the output root.
    2. Link every skill into ``<root>/skills/<name>``.
    3. Reshape MCP servers with the profile's schema and merge them into
       the profile's settings file (skipped when there are no servers).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skillsync.discovery.tool_registry import HOME
from skillsync.parsers.models import ClaudeHomeConfig, McpServer, is_remote_server
from skillsync.targets._fs import ensure_dir
from skillsync.targets.links import link_skills
from skillsync.targets.merge import JsonCodec, SettingsCodec, write_merged_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class McpSchema:
    """Declarative translation of an MCP server entry to a target schema.

    Fields not named in a rename map are passed through unchanged. Fields
    in the ``*_fields`` maps are added after renaming and win over any
    field of the same name carried by the source entry.

    Attributes:
        local_renames: Source field to target field, for command servers.
        remote_renames: Source field to target field, for URL servers.
        local_fields: Constant fields added to command servers.
        remote_fields: Constant fields added to URL servers.
        command_includes_args: Fold ``args`` into ``command`` as a single
            ``[command, *args]`` list.
    """

    local_renames: Mapping[str, str] = field(default_factory=dict)
    remote_renames: Mapping[str, str] = field(default_factory=dict)
    local_fields: Mapping[str, Any] = field(default_factory=dict)
    remote_fields: Mapping[str, Any] = field(default_factory=dict)
    command_includes_args: bool = False

    def reshape(self, server: McpServer) -> McpServer:
        """Translate one server entry. The input is not modified."""
        remote = is_remote_server(server)
        renames = self.remote_renames if remote else self.local_renames
        extra = self.remote_fields if remote else self.local_fields

        source = dict(server)
        if not remote and self.command_includes_args and "command" in source:
            source["command"] = [source["command"], *source.pop("args", [])]

        shaped = {renames.get(key, key): value for key, value in source.items()}
        shaped.update(extra)
        return shaped


PASS_THROUGH = McpSchema()


@dataclass(frozen=True)
class TargetProfile:
    """Static description of one sync target.

    Attributes:
        name: Target identifier used on the command line.
        label: Human-readable name.
        root_base: ``"home"`` or ``"cwd"``; anchor of the output root.
        root_path: Output root relative to its anchor.
        settings_path: Settings file relative to the output root.
        container_key: Top-level key that holds the server map.
        codec: Reads and writes the settings file format.
        mcp_schema: Reshaping rules for server entries.
    """

    name: str
    label: str
    root_base: str
    root_path: str
    settings_path: str
    container_key: str = "mcpServers"
    codec: SettingsCodec = field(default_factory=JsonCodec)
    mcp_schema: McpSchema = PASS_THROUGH

    def resolve_output_root(self, home: Path, cwd: Path) -> Path:
        """Return the absolute output root for the given roots."""
        return (home if self.root_base == HOME else cwd) / self.root_path


@dataclass
class ProjectionResult:
    """What a single projector run produced.

    Attributes:
        skills_linked: Number of skill links in place after the run.
        settings_path: Settings file that carries the servers, or None
            when there were no servers to write.
    """

    skills_linked: int = 0
    settings_path: Path | None = None


class TargetProjector:
    """Materializes a ``ClaudeHomeConfig`` for one target profile.

    Usage::

        projector = TargetProjector(profile)
        result = projector.project(config, Path("~/.codex").expanduser())
    """

    def __init__(self, profile: TargetProfile) -> None:
        self.profile = profile

    @property
    def name(self) -> str:
        return self.profile.name

    def convert_servers(self, servers: Mapping[str, McpServer]) -> dict[str, McpServer]:
        """Reshape every server entry with the profile's schema."""
        schema = self.profile.mcp_schema
        return {name: schema.reshape(server) for name, server in servers.items()}

    def project(self, config: ClaudeHomeConfig, output_root: Path) -> ProjectionResult:
        """Write this target's view of ``config`` under ``output_root``.

        Raises:
            DuplicateSkillNameError: If two skills share a name.
            SkillLinkConflictError: If user data occupies a skill link path.
            SettingsParseError: If the existing settings file is invalid.
            SettingsEncodeError: If servers cannot be written in the
                settings format.
            FilesystemError: On any filesystem failure.
        """
        ensure_dir(output_root)
        result = ProjectionResult()
        result.skills_linked = link_skills(config.skills, output_root / "skills")

        if config.mcp_servers:
            settings_file = output_root / self.profile.settings_path
            write_merged_settings(
                settings_file,
                self.profile.codec,
                self.profile.container_key,
                self.convert_servers(config.mcp_servers),
            )
            result.settings_path = settings_file

        logger.info(
            "Projected %d skill(s), %d MCP server(s) to %s at %s",
            result.skills_linked, len(config.mcp_servers), self.name, output_root,
        )
        return result
