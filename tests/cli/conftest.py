"""Shared fixtures for CLI tests.

Builds a Claude home plus synthetic user home and project directories,
and points the CLI at them through its options and environment.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def claude_home(tmp_path: Path) -> Path:
    """A Claude home with one skill and one remote MCP server."""
    home = tmp_path / "claude"
    skill = home / "skills" / "skill-one"
    skill.mkdir(parents=True)
    (skill / "SKILL.md").write_text("---\nname: skill-one\n---\n")
    (home / "settings.json").write_text(json.dumps({
        "mcpServers": {"context7": {"url": "https://mcp.context7.com/mcp"}},
    }))
    return home


@pytest.fixture
def secret_claude_home(claude_home: Path) -> Path:
    """Claude home whose MCP server carries an API key env var."""
    (claude_home / "settings.json").write_text(json.dumps({
        "mcpServers": {"svc": {"command": "run", "env": {"API_KEY": "x"}}},
    }))
    return claude_home


@pytest.fixture
def project(cwd_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the CLI from a synthetic project directory."""
    monkeypatch.chdir(cwd_dir)
    return cwd_dir
