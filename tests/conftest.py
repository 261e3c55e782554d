"""Shared fixtures for skillsync tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from skillsync.parsers.models import ClaudeHomeConfig, SkillEntry

SkillFactory = Callable[[str], SkillEntry]


@pytest.fixture
def skill_source(tmp_path: Path) -> Path:
    """Directory holding source skill bundles."""
    source = tmp_path / "source-skills"
    source.mkdir()
    return source


@pytest.fixture
def make_skill(skill_source: Path) -> SkillFactory:
    """Factory creating a skill directory with a SKILL.md manifest."""

    def _make(name: str) -> SkillEntry:
        skill_dir = skill_source / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        manifest = skill_dir / "SKILL.md"
        manifest.write_text(f"---\nname: {name}\n---\n\nDoes {name} things.\n")
        return SkillEntry(name=name, source_dir=skill_dir, skill_path=manifest)

    return _make


@pytest.fixture
def sample_config(make_skill: SkillFactory) -> ClaudeHomeConfig:
    """Two skills, one remote and one local MCP server."""
    return ClaudeHomeConfig(
        skills=[make_skill("skill-one"), make_skill("skill-two")],
        mcp_servers={
            "context7": {"url": "https://mcp.context7.com/mcp"},
            "local": {"command": "echo", "args": ["hello"], "env": {"FOO": "bar"}},
        },
    )


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Synthetic user home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def cwd_dir(tmp_path: Path) -> Path:
    """Synthetic project working directory."""
    cwd = tmp_path / "project"
    cwd.mkdir()
    return cwd
