"""skillsync: Project a Claude Code home into other AI coding tools."""

from __future__ import annotations

import logging

__version__ = "0.1.0"
__license__ = "MIT"

# Library modules log; the CLI decides whether anything is shown.
logging.getLogger(__name__).addHandler(logging.NullHandler())
