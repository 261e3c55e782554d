"""Filesystem helpers shared by the projectors."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from skillsync.exceptions import FilesystemError


@contextmanager
def filesystem_op(operation: str, path: Path) -> Iterator[None]:
    """Translate ``OSError`` raised inside the block into ``FilesystemError``."""
    try:
        yield
    except OSError as exc:
        raise FilesystemError(operation, path, exc) from exc


def ensure_dir(path: Path) -> None:
    """Create ``path`` and its parents; existing directories are fine."""
    with filesystem_op("mkdir", path):
        path.mkdir(parents=True, exist_ok=True)
