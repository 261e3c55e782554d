"""Rich output formatting helpers for the skillsync CLI.

Status Styles:
    synced / detected = green, failed = bold red, skipped / not found = dim,
    advisories = yellow
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from skillsync.discovery.models import DetectedTool
from skillsync.sync.models import SyncReport, TargetOutcome

console = Console()


def print_detection_table(detections: list[DetectedTool]) -> None:
    """Print one row per known tool with its detection evidence."""
    table = Table(title="Detected AI Tools", show_header=True, header_style="bold")
    table.add_column("Tool", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Evidence", overflow="fold")

    for tool in detections:
        if tool.detected:
            status = Text("✓ found", style="green")
        else:
            status = Text("✗ missing", style="dim")
        table.add_row(tool.name, status, tool.reason)

    console.print(table)


def print_secrets_warning(sensitive_keys: list[str]) -> None:
    """Warn that secrets may be copied into target config files."""
    console.print(
        "[yellow]⚠  Warning: MCP servers contain env vars that may include "
        "secrets (API keys, tokens).[/yellow]",
        soft_wrap=True,
    )
    console.print(
        "   These will be copied to the target config. "
        "Review before sharing the config file.",
        soft_wrap=True,
    )
    if sensitive_keys:
        console.print(f"   [dim]{escape(', '.join(sensitive_keys))}[/dim]", soft_wrap=True)


def print_outcome(outcome: TargetOutcome) -> None:
    """Print a confirmation or failure line for one target."""
    root = escape(str(outcome.output_root))
    if outcome.ok:
        console.print(
            f"[green]✓[/green] Synced to {outcome.name}: {root}",
            soft_wrap=True,
        )
    else:
        console.print(
            f"[bold red]✗[/bold red] Failed to sync {outcome.name}: "
            f"{escape(str(outcome.error))}",
            soft_wrap=True,
        )


def print_sync_report(report: SyncReport) -> None:
    """Print every outcome followed by a one-line summary."""
    if report.nothing_to_do:
        console.print("No AI coding tools detected.")
        return

    for outcome in report.outcomes:
        print_outcome(outcome)

    if len(report.outcomes) > 1:
        synced = len(report.outcomes) - len(report.failures)
        parts = [f"[bold]{len(report.outcomes)}[/bold] targets"]
        parts.append(f"[green]{synced} synced[/green]")
        if report.failures:
            parts.append(f"[red]{len(report.failures)} failed[/red]")
        console.print(" | ".join(parts))
