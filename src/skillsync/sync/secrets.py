"""Best-effort advisory for secrets carried in MCP server environments.

Environment variable *names* are matched case-insensitively against
fragments that usually indicate credentials. This is a heuristic: it
informs the operator that generated target files may contain sensitive
values. It is not a security control and never changes what is synced.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_SENSITIVE_ENV_PATTERN = re.compile(
    r"key|token|secret|password|credential|api_key", re.IGNORECASE,
)


def sensitive_env_keys(mcp_servers: Mapping[str, Mapping[str, Any]]) -> list[str]:
    """Return ``server.ENV_NAME`` for every env key that looks secret."""
    hits: list[str] = []
    for server_name, server in mcp_servers.items():
        env = server.get("env")
        if not isinstance(env, Mapping):
            continue
        for key in env:
            if _SENSITIVE_ENV_PATTERN.search(str(key)):
                hits.append(f"{server_name}.{key}")
    return hits


def has_potential_secrets(mcp_servers: Mapping[str, Mapping[str, Any]]) -> bool:
    """Check if any MCP server env var name suggests a secret."""
    return bool(sensitive_env_keys(mcp_servers))
