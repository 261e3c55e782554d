"""Registry of the six sync targets.

Each entry is a ``TargetProfile``; per-target behaviour lives entirely in
these records. Lookups replace branching on the target name.

Target notes:
    opencode  -- ``opencode.json`` under ``mcp``; local servers become
                 ``{type: local, command: [cmd, *args], environment}``.
    codex     -- ``config.toml`` under ``[mcp_servers.<name>]``.
    pi        -- mcporter config; remote ``url`` is spelled ``baseUrl``.
    droid     -- ``mcp.json`` with an explicit transport ``type``.
    cursor    -- project ``.cursor/mcp.json``, Claude shape as-is.
    gemini    -- project ``.gemini/settings.json``, Claude shape as-is.
"""

from __future__ import annotations

from pathlib import Path

from skillsync.discovery.tool_registry import CWD, HOME
from skillsync.exceptions import UnknownTargetError
from skillsync.targets.base import McpSchema, TargetProfile, TargetProjector
from skillsync.targets.merge import TomlCodec

TARGET_PROFILES: dict[str, TargetProfile] = {
    profile.name: profile
    for profile in (
        TargetProfile(
            name="opencode",
            label="OpenCode",
            root_base=HOME,
            root_path=".config/opencode",
            settings_path="opencode.json",
            container_key="mcp",
            mcp_schema=McpSchema(
                local_renames={"env": "environment"},
                local_fields={"type": "local", "enabled": True},
                remote_fields={"type": "remote", "enabled": True},
                command_includes_args=True,
            ),
        ),
        TargetProfile(
            name="codex",
            label="Codex CLI",
            root_base=HOME,
            root_path=".codex",
            settings_path="config.toml",
            container_key="mcp_servers",
            codec=TomlCodec(),
        ),
        TargetProfile(
            name="pi",
            label="Pi",
            root_base=HOME,
            root_path=".pi/agent",
            settings_path="compound-engineering/mcporter.json",
            mcp_schema=McpSchema(remote_renames={"url": "baseUrl"}),
        ),
        TargetProfile(
            name="droid",
            label="Factory Droid",
            root_base=HOME,
            root_path=".factory",
            settings_path="mcp.json",
            mcp_schema=McpSchema(
                local_fields={"type": "stdio", "disabled": False},
                remote_fields={"type": "http", "disabled": False},
            ),
        ),
        TargetProfile(
            name="cursor",
            label="Cursor",
            root_base=CWD,
            root_path=".cursor",
            settings_path="mcp.json",
        ),
        TargetProfile(
            name="gemini",
            label="Gemini CLI",
            root_base=CWD,
            root_path=".gemini",
            settings_path="settings.json",
        ),
    )
}

TARGET_NAMES: tuple[str, ...] = tuple(TARGET_PROFILES)
ALL_TARGETS = "all"
VALID_TARGETS: tuple[str, ...] = (*TARGET_NAMES, ALL_TARGETS)


def get_profile(name: str) -> TargetProfile:
    """Look up a target profile.

    Raises:
        UnknownTargetError: If ``name`` is not a known target.
    """
    try:
        return TARGET_PROFILES[name]
    except KeyError:
        raise UnknownTargetError(name, list(VALID_TARGETS)) from None


def get_projector(name: str) -> TargetProjector:
    """Return the projector for a target name."""
    return TargetProjector(get_profile(name))


def resolve_output_root(name: str, home: Path, cwd: Path) -> Path:
    """Return the output root for a target given explicit roots."""
    return get_profile(name).resolve_output_root(home, cwd)
