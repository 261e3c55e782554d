"""Normalized, target-agnostic model of a Claude Code home.

The ``ClaudeHomeConfig`` is the single input every target projector
consumes. It is built once per invocation by ``load_claude_home`` and is
never mutated afterwards, so projectors may share it freely.

MCP server entries are kept as plain mappings. Two shapes are expected:

- **remote** -- ``{"url": ...}`` (optionally ``headers``).
- **local** -- ``{"command": ..., "args": [...], "env": {...}}`` where
  ``args`` and ``env`` are optional.

Any other fields are carried through untouched; projectors only rename or
add fields according to their target's schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

McpServer = dict[str, Any]


@dataclass(frozen=True)
class SkillEntry:
    """A named skill bundle found in the agent home.

    Attributes:
        name: Directory name of the skill; becomes the link name in every
            target's ``skills/`` directory.
        source_dir: Absolute path to the skill directory. Symlinked skills
            are resolved to their real location.
        skill_path: Absolute path to the skill manifest (``SKILL.md``).
    """

    name: str
    source_dir: Path
    skill_path: Path


@dataclass(frozen=True)
class ClaudeHomeConfig:
    """Skills and MCP servers loaded from a Claude Code home.

    Attributes:
        skills: Skills in load order.
        mcp_servers: Server name to server definition.
    """

    skills: list[SkillEntry] = field(default_factory=list)
    mcp_servers: dict[str, McpServer] = field(default_factory=dict)


def is_remote_server(server: McpServer) -> bool:
    """Return True for a URL-based server that has no local command."""
    return "url" in server and "command" not in server
