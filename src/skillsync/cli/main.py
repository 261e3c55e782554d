"""skillsync CLI -- Sync a Claude Code home into other AI coding tools.

Entry point for the ``skillsync`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    sync    -- Link skills and merge MCP servers into one or all targets.
    detect  -- Show which supported tools are installed.

Usage::

    skillsync sync gemini
    skillsync sync all --claude-home ~/work/.claude
    skillsync detect --json
"""

from __future__ import annotations

import logging

import click

from skillsync import __version__
from skillsync.cli.detect_cmd import detect_command
from skillsync.cli.sync_cmd import sync_command


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """skillsync: Sync Claude Code skills and MCP servers to OpenCode,
    Codex, Pi, Droid, Cursor, and Gemini.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register all subcommands
cli.add_command(sync_command)
cli.add_command(detect_command)
