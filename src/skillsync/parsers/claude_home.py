"""Loader for a Claude Code home directory (``~/.claude``).

Two sources are read:

- ``skills/<name>/SKILL.md`` -- every entry of the skills directory that
  is a directory (or a symlink to one) and carries a ``SKILL.md`` manifest
  becomes a ``SkillEntry``. Symlinked skills are resolved so that targets
  link straight to the real skill directory.
- ``settings.json`` -- the ``mcpServers`` map, taken as-is.

Everything missing is treated as empty: a home without skills or
settings simply produces an empty ``ClaudeHomeConfig``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from skillsync.parsers.models import ClaudeHomeConfig, McpServer, SkillEntry

logger = logging.getLogger(__name__)

SKILL_MANIFEST = "SKILL.md"
SETTINGS_FILENAME = "settings.json"


def default_claude_home() -> Path:
    """Return ``~/.claude`` for the current user."""
    return Path.home() / ".claude"


def load_claude_home(claude_home: Path | str | None = None) -> ClaudeHomeConfig:
    """Build the config model from a Claude Code home directory.

    Args:
        claude_home: Path to the home. ``~`` is expanded. Defaults to
            ``~/.claude``.

    Returns:
        A ``ClaudeHomeConfig`` with skills sorted by name.
    """
    home = Path(claude_home).expanduser() if claude_home else default_claude_home()
    skills = _load_skills(home / "skills")
    mcp_servers = _load_mcp_servers(home / SETTINGS_FILENAME)
    logger.debug(
        "Loaded %d skills and %d MCP servers from %s",
        len(skills), len(mcp_servers), home,
    )
    return ClaudeHomeConfig(skills=skills, mcp_servers=mcp_servers)


def _load_skills(skills_dir: Path) -> list[SkillEntry]:
    """Collect skill directories that contain a manifest."""
    if not skills_dir.is_dir():
        return []

    skills: list[SkillEntry] = []
    for entry in sorted(skills_dir.iterdir(), key=lambda p: p.name):
        if not (entry.is_dir() or entry.is_symlink()):
            continue
        manifest = entry / SKILL_MANIFEST
        if not manifest.is_file():
            continue
        source_dir = entry.resolve() if entry.is_symlink() else entry.absolute()
        skills.append(SkillEntry(
            name=entry.name,
            source_dir=source_dir,
            skill_path=source_dir / SKILL_MANIFEST,
        ))
    return skills


def _load_mcp_servers(settings_path: Path) -> dict[str, McpServer]:
    """Read the ``mcpServers`` map from Claude's settings file."""
    if not settings_path.is_file():
        return {}
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("Ignoring unreadable settings file: %s", settings_path)
        return {}

    if not isinstance(data, dict):
        return {}
    servers = data.get("mcpServers", {})
    if not isinstance(servers, dict):
        logger.warning("Ignoring non-object mcpServers in %s", settings_path)
        return {}
    return {
        name: dict(server)
        for name, server in servers.items()
        if isinstance(server, dict)
    }
