"""Loading of the Claude Code home into the normalized config model."""

from skillsync.parsers.claude_home import load_claude_home
from skillsync.parsers.models import ClaudeHomeConfig, McpServer, SkillEntry

__all__ = [
    "ClaudeHomeConfig",
    "McpServer",
    "SkillEntry",
    "load_claude_home",
]
