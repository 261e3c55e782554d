"""``skillsync detect`` -- Show which AI coding tools are installed.

Exit Codes:
    0 -- Always (informational command).
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

import click

from skillsync.cli.output import print_detection_table
from skillsync.discovery import detect_installed_tools


@click.command("detect")
@click.option(
    "--home",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="SKILLSYNC_HOME",
    default=None,
    help="Home directory to probe (default: ~).",
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    default=False,
    help="Print results as JSON.",
)
def detect_command(home: Path | None, as_json: bool) -> None:
    """List known AI coding tools and whether each was detected."""
    detections = detect_installed_tools(home=home.expanduser() if home else None)
    if as_json:
        click.echo(json.dumps([asdict(t) for t in detections], indent=2))
    else:
        print_detection_table(detections)
