"""Skill symlinks under a target's ``skills/`` directory.

Each skill becomes ``<output_root>/skills/<name>`` pointing at the skill's
source directory. Links are refreshed, never forced:

- a link already pointing at the source is left alone;
- a link pointing anywhere else (or dangling) is replaced;
- a regular file or directory at the link path is user data and raises
  ``SkillLinkConflictError`` without being touched.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from skillsync.exceptions import DuplicateSkillNameError, SkillLinkConflictError
from skillsync.parsers.models import SkillEntry
from skillsync.targets._fs import ensure_dir, filesystem_op

logger = logging.getLogger(__name__)


def check_unique_names(skills: Iterable[SkillEntry]) -> None:
    """Raise ``DuplicateSkillNameError`` on the first repeated skill name."""
    seen: set[str] = set()
    for skill in skills:
        if skill.name in seen:
            raise DuplicateSkillNameError(skill.name)
        seen.add(skill.name)


def link_skill(source_dir: Path, link_path: Path) -> bool:
    """Create or refresh one skill symlink.

    Returns:
        True if a link was created or replaced, False if it was current.

    Raises:
        SkillLinkConflictError: If a non-link occupies ``link_path``.
        FilesystemError: On any other filesystem failure.
    """
    with filesystem_op("inspect", link_path):
        if link_path.is_symlink():
            if Path(os.readlink(link_path)) == source_dir:
                return False
            logger.debug("Replacing stale link %s", link_path)
            link_path.unlink()
        elif link_path.exists():
            raise SkillLinkConflictError(link_path)

    with filesystem_op("symlink", link_path):
        link_path.symlink_to(source_dir, target_is_directory=True)
    return True


def link_skills(skills: list[SkillEntry], skills_dir: Path) -> int:
    """Link every skill into ``skills_dir``.

    Returns:
        Number of skills linked (including ones already current).
    """
    check_unique_names(skills)
    if not skills:
        return 0

    ensure_dir(skills_dir)
    changed = 0
    for skill in skills:
        if link_skill(skill.source_dir, skills_dir / skill.name):
            changed += 1
    logger.debug("Linked %d skill(s) into %s, %d changed", len(skills), skills_dir, changed)
    return len(skills)
