"""``skillsync sync TARGET`` -- Project the Claude home into AI tools.

TARGET is one of the six supported tools or ``all``. With ``all``, only
tools detected on this machine (or in the current project) are synced;
a failing tool does not stop the others.

Exit Codes:
    0 -- Every attempted target synced, or nothing was detected.
    1 -- At least one target failed.
    2 -- Invalid usage (e.g., unknown target).
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from skillsync.cli.output import (
    console,
    print_detection_table,
    print_secrets_warning,
    print_sync_report,
)
from skillsync.parsers import load_claude_home
from skillsync.sync import SyncOrchestrator
from skillsync.targets import ALL_TARGETS, VALID_TARGETS


@click.command("sync")
@click.argument("target", type=click.Choice(VALID_TARGETS))
@click.option(
    "--claude-home",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="SKILLSYNC_CLAUDE_HOME",
    default=None,
    help="Path to the Claude home (default: ~/.claude).",
)
@click.option(
    "--home",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="SKILLSYNC_HOME",
    default=None,
    help="Home directory for tool detection and output roots (default: ~).",
)
def sync_command(target: str, claude_home: Path | None, home: Path | None) -> None:
    """Sync Claude Code skills and MCP servers to TARGET.

    TARGET: opencode | codex | pi | droid | cursor | gemini | all
    """
    config = load_claude_home(claude_home)
    orchestrator = SyncOrchestrator(home=home.expanduser() if home else None)

    if target != ALL_TARGETS:
        console.print(
            f"Syncing {len(config.skills)} skills, "
            f"{len(config.mcp_servers)} MCP servers..."
        )

    report = orchestrator.run(target, config)

    # The orchestrator only logs the advisory; this is what users see.
    if report.secrets_warning:
        print_secrets_warning(report.sensitive_keys)

    if report.detections and not report.nothing_to_do:
        active = sum(1 for t in report.detections if t.detected)
        console.print(f"Syncing to {active} detected tool(s)...")
        print_detection_table(report.detections)

    print_sync_report(report)
    sys.exit(0 if report.ok else 1)
