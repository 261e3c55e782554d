"""Tests for ``SyncOrchestrator`` target resolution and dispatch."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import pytest

from skillsync.exceptions import (
    SettingsEncodeError,
    SkillLinkConflictError,
    UnknownTargetError,
)
from skillsync.parsers.models import ClaudeHomeConfig
from skillsync.sync import SyncOrchestrator


def _snapshot(root: Path) -> list[str]:
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))


@pytest.fixture
def orchestrator(home_dir: Path, cwd_dir: Path) -> SyncOrchestrator:
    return SyncOrchestrator(home=home_dir, cwd=cwd_dir)


# ---------------------------------------------------------------------------
# Explicit targets
# ---------------------------------------------------------------------------


class TestExplicitTarget:

    def test_unknown_target_fails_fast(
        self, orchestrator: SyncOrchestrator, sample_config: ClaudeHomeConfig,
        home_dir: Path, cwd_dir: Path,
    ) -> None:
        with pytest.raises(UnknownTargetError) as excinfo:
            orchestrator.run("vscode", sample_config)
        assert "gemini" in str(excinfo.value)
        assert "all" in excinfo.value.valid
        assert _snapshot(home_dir) == [] and _snapshot(cwd_dir) == []

    def test_syncs_single_target(
        self, orchestrator: SyncOrchestrator, sample_config: ClaudeHomeConfig,
        cwd_dir: Path,
    ) -> None:
        report = orchestrator.run("gemini", sample_config)

        assert report.ok
        assert [o.name for o in report.outcomes] == ["gemini"]
        outcome = report.outcomes[0]
        assert outcome.output_root == cwd_dir / ".gemini"
        assert outcome.skills_linked == 2
        assert outcome.settings_path == cwd_dir / ".gemini" / "settings.json"
        assert report.detections == []
        assert not report.nothing_to_do

    def test_explicit_target_ignores_detection(
        self, orchestrator: SyncOrchestrator, sample_config: ClaudeHomeConfig,
        home_dir: Path,
    ) -> None:
        """An explicit target is synced even when the tool is not installed."""
        report = orchestrator.run("codex", sample_config)
        assert report.ok
        assert (home_dir / ".codex" / "config.toml").is_file()

    def test_failure_is_reported_not_raised(
        self, orchestrator: SyncOrchestrator, sample_config: ClaudeHomeConfig,
        cwd_dir: Path,
    ) -> None:
        (cwd_dir / ".cursor" / "skills" / "skill-one").mkdir(parents=True)
        report = orchestrator.run("cursor", sample_config)
        assert not report.ok
        assert isinstance(report.outcomes[0].error, SkillLinkConflictError)


# ---------------------------------------------------------------------------
# "all"
# ---------------------------------------------------------------------------


class TestSyncAll:

    def test_nothing_detected_writes_nothing(
        self, orchestrator: SyncOrchestrator, sample_config: ClaudeHomeConfig,
        home_dir: Path, cwd_dir: Path,
    ) -> None:
        report = orchestrator.run("all", sample_config)

        assert report.nothing_to_do
        assert report.outcomes == []
        assert len(report.detections) == 6
        assert report.ok
        assert _snapshot(home_dir) == [] and _snapshot(cwd_dir) == []

    def test_syncs_detected_targets_in_canonical_order(
        self, orchestrator: SyncOrchestrator, sample_config: ClaudeHomeConfig,
        home_dir: Path, cwd_dir: Path,
    ) -> None:
        (cwd_dir / ".gemini").mkdir()
        (home_dir / ".codex").mkdir()

        report = orchestrator.run("all", sample_config)

        assert [o.name for o in report.outcomes] == ["codex", "gemini"]
        assert report.ok
        assert (home_dir / ".codex" / "skills" / "skill-one").is_symlink()
        assert (cwd_dir / ".gemini" / "skills" / "skill-one").is_symlink()
        assert not (home_dir / ".factory").exists()

    def test_partial_failure_continues(
        self, orchestrator: SyncOrchestrator, sample_config: ClaudeHomeConfig,
        home_dir: Path, cwd_dir: Path,
    ) -> None:
        (home_dir / ".codex" / "skills" / "skill-one").mkdir(parents=True)
        (cwd_dir / ".gemini").mkdir()

        report = orchestrator.run("all", sample_config)

        codex, gemini = report.outcomes
        assert codex.name == "codex" and not codex.ok
        assert isinstance(codex.error, SkillLinkConflictError)
        assert gemini.name == "gemini" and gemini.ok
        assert not report.ok
        assert report.failures == [codex]
        settings = json.loads((cwd_dir / ".gemini" / "settings.json").read_text())
        assert settings["mcpServers"]["context7"]["url"] == "https://mcp.context7.com/mcp"
        assert (home_dir / ".codex" / "skills" / "skill-one").is_dir()
        assert not (home_dir / ".codex" / "skills" / "skill-one").is_symlink()

    def test_unencodable_server_fails_only_its_target(
        self, orchestrator: SyncOrchestrator, home_dir: Path, cwd_dir: Path,
    ) -> None:
        """A null field cannot be written as TOML; JSON targets still sync."""
        (home_dir / ".codex").mkdir()
        (cwd_dir / ".gemini").mkdir()
        config = ClaudeHomeConfig(mcp_servers={"svc": {"command": "run", "env": None}})

        report = orchestrator.run("all", config)

        codex, gemini = report.outcomes
        assert isinstance(codex.error, SettingsEncodeError)
        assert not (home_dir / ".codex" / "config.toml").exists()
        assert gemini.ok
        settings = json.loads((cwd_dir / ".gemini" / "settings.json").read_text())
        assert settings["mcpServers"]["svc"] == {"command": "run", "env": None}


# ---------------------------------------------------------------------------
# Secrets advisory
# ---------------------------------------------------------------------------


class TestSecretsAdvisory:

    def _config(self, env: dict[str, str]) -> ClaudeHomeConfig:
        return ClaudeHomeConfig(mcp_servers={"svc": {"command": "run", "env": env}})

    def test_fires_for_api_key(
        self, orchestrator: SyncOrchestrator, cwd_dir: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="skillsync"):
            report = orchestrator.run("cursor", self._config({"API_KEY": "x"}))
        assert report.secrets_warning
        assert report.sensitive_keys == ["svc.API_KEY"]
        assert "svc.API_KEY" in caplog.text
        written = json.loads((cwd_dir / ".cursor" / "mcp.json").read_text())
        assert written["mcpServers"]["svc"]["env"] == {"API_KEY": "x"}

    def test_quiet_for_port(
        self, orchestrator: SyncOrchestrator, cwd_dir: Path,
    ) -> None:
        report = orchestrator.run("cursor", self._config({"PORT": "8080"}))
        assert not report.secrets_warning
        written = json.loads((cwd_dir / ".cursor" / "mcp.json").read_text())
        assert written["mcpServers"]["svc"]["env"] == {"PORT": "8080"}

    def test_fires_even_when_nothing_detected(
        self, orchestrator: SyncOrchestrator,
    ) -> None:
        report = orchestrator.run("all", self._config({"GITHUB_TOKEN": "x"}))
        assert report.secrets_warning
        assert report.nothing_to_do


class TestDefaults:

    def test_defaults_to_process_roots(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.chdir(tmp_path)
        orchestrator = SyncOrchestrator()
        assert orchestrator.home == Path.home()
        assert Path(os.path.realpath(orchestrator.cwd)) == Path(os.path.realpath(tmp_path))
