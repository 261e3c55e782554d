"""Static registry of sync targets and the marker paths that reveal them.

Each ``ToolProfile`` lists, in probe order, the filesystem paths whose
presence means the tool is installed. Markers are anchored either at the
user's home directory or at the current working directory. The marker
sets are the compatibility contract with each external tool and must not
drift from what those tools actually create.

Profiles are listed in canonical order; every detection report follows
this order so output is deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

HOME = "home"
CWD = "cwd"


@dataclass(frozen=True)
class MarkerPath:
    """One candidate path for detecting a tool.

    Attributes:
        base: Anchor of the path, ``"home"`` or ``"cwd"``.
        relative: Path relative to the anchor (e.g., ``.config/opencode``).
    """

    base: str
    relative: str

    def resolve(self, home: Path, cwd: Path) -> Path:
        """Return the absolute candidate path for the given roots."""
        root = home if self.base == HOME else cwd
        return root / self.relative


@dataclass(frozen=True)
class ToolProfile:
    """Describes how to recognise one installed AI coding tool.

    Attributes:
        name: Machine identifier, identical to the sync target name.
        label: Human-readable display name.
        markers: Candidate paths, probed in order; first hit wins.
    """

    name: str
    label: str
    markers: tuple[MarkerPath, ...]


TOOL_PROFILES: tuple[ToolProfile, ...] = (
    ToolProfile(
        name="opencode",
        label="OpenCode",
        markers=(MarkerPath(HOME, ".config/opencode"), MarkerPath(CWD, ".opencode")),
    ),
    ToolProfile(
        name="codex",
        label="Codex CLI",
        markers=(MarkerPath(HOME, ".codex"),),
    ),
    ToolProfile(
        name="droid",
        label="Factory Droid",
        markers=(MarkerPath(HOME, ".factory"),),
    ),
    # Project-scoped tools: a marker in the working directory wins.
    ToolProfile(
        name="cursor",
        label="Cursor",
        markers=(MarkerPath(CWD, ".cursor"), MarkerPath(HOME, ".cursor")),
    ),
    ToolProfile(
        name="pi",
        label="Pi",
        markers=(MarkerPath(HOME, ".pi"),),
    ),
    ToolProfile(
        name="gemini",
        label="Gemini CLI",
        markers=(MarkerPath(CWD, ".gemini"), MarkerPath(HOME, ".gemini")),
    ),
)

TOOL_NAMES: tuple[str, ...] = tuple(p.name for p in TOOL_PROFILES)
