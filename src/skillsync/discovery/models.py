"""Data models for the discovery module."""

from __future__ import annotations

from dataclasses import dataclass

NOT_FOUND = "not found"


@dataclass(frozen=True)
class DetectedTool:
    """Detection outcome for a single known tool.

    Attributes:
        name: Tool identifier (matches the sync target name).
        detected: True when one of the tool's marker paths exists.
        reason: ``"found <path>"`` for the first marker hit, otherwise
            ``"not found"``.
    """

    name: str
    detected: bool
    reason: str = NOT_FOUND
