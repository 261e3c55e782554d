"""Merging of generated MCP servers into existing settings files.

Every target that understands a structured settings file goes through the
same two steps:

1. ``merge_settings`` -- a pure transform over plain mappings. Top-level
   keys other than the container are preserved; inside the container,
   generated servers are added or replace same-named entries wholesale.
   Existing servers that were not generated survive.
2. ``write_merged_settings`` -- reads the current file through a
   ``SettingsCodec``, merges, and writes the result back with stable
   formatting.

An empty generated mapping means "skip": no file is created or touched.
An existing file that cannot be parsed aborts the merge and is left as
it is, so user data is never replaced by a partial view of it.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from skillsync.exceptions import SettingsEncodeError, SettingsParseError
from skillsync.targets._fs import ensure_dir, filesystem_op

logger = logging.getLogger(__name__)


class SettingsCodec(ABC):
    """Reads and writes one structured settings format."""

    @abstractmethod
    def loads(self, text: str) -> dict[str, Any]:
        """Parse settings text into a plain dict.

        Raises:
            ValueError: If the text is not valid for this format.
        """

    @abstractmethod
    def dumps(self, data: Mapping[str, Any]) -> str:
        """Render settings as text with stable formatting."""


class JsonCodec(SettingsCodec):
    """JSON settings with two-space indentation and a trailing newline."""

    def loads(self, text: str) -> dict[str, Any]:
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("top-level value is not an object")
        return data

    def dumps(self, data: Mapping[str, Any]) -> str:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


class TomlCodec(SettingsCodec):
    """TOML settings, as used by Codex's ``config.toml``."""

    def loads(self, text: str) -> dict[str, Any]:
        try:
            return tomlkit.parse(text).unwrap()
        except TOMLKitError as exc:
            raise ValueError(str(exc)) from exc

    def dumps(self, data: Mapping[str, Any]) -> str:
        return tomlkit.dumps(data)


def merge_settings(
    existing: Mapping[str, Any] | None,
    container_key: str,
    generated: Mapping[str, Any],
) -> dict[str, Any] | None:
    """Merge generated servers into existing settings content.

    Args:
        existing: Parsed settings, or None when there is no file.
        container_key: Top-level key holding the server map
            (``mcpServers``, ``mcp``, ``mcp_servers``).
        generated: Server name to target-shaped server definition.

    Returns:
        The content to persist, or None when ``generated`` is empty.
        Neither input is mutated.

    Raises:
        ValueError: If the existing container is neither a mapping nor
            null. A null container counts as empty.
    """
    if not generated:
        return None
    if existing is None:
        return {container_key: dict(generated)}

    current = existing.get(container_key)
    if current is None:
        current = {}
    if not isinstance(current, Mapping):
        raise ValueError(f"'{container_key}' is not an object")

    merged = dict(existing)
    merged[container_key] = {**current, **generated}
    return merged


def write_merged_settings(
    path: Path,
    codec: SettingsCodec,
    container_key: str,
    generated: Mapping[str, Any],
) -> bool:
    """Merge ``generated`` into the settings file at ``path``.

    An empty or whitespace-only existing file counts as empty settings.

    Returns:
        True if the file was written, False when skipped (nothing
        generated, or content already up to date).

    Raises:
        SettingsParseError: If the existing file is not valid for the codec.
        SettingsEncodeError: If the merged content cannot be rendered
            by the codec; the file is left untouched.
        FilesystemError: On read or write failure.
    """
    if not generated:
        logger.debug("No MCP servers, leaving %s alone", path)
        return False

    raw: bytes | None = None
    with filesystem_op("read", path):
        if path.exists():
            raw = path.read_bytes()

    existing_text: str | None = None
    if raw is not None:
        try:
            existing_text = raw.decode("utf-8")
            existing = codec.loads(existing_text) if existing_text.strip() else {}
            merged = merge_settings(existing, container_key, generated)
        except ValueError as exc:
            raise SettingsParseError(path, str(exc)) from exc
    else:
        merged = merge_settings(None, container_key, generated)

    try:
        rendered = codec.dumps(merged)
    except (TypeError, ValueError, TOMLKitError) as exc:
        raise SettingsEncodeError(path, str(exc)) from exc

    if rendered == existing_text:
        logger.debug("Settings already up to date: %s", path)
        return False

    ensure_dir(path.parent)
    with filesystem_op("write", path):
        path.write_text(rendered, encoding="utf-8")
    logger.info("Wrote %d MCP server(s) to %s", len(generated), path)
    return True
