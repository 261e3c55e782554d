"""Sync orchestration across target projectors."""

from __future__ import annotations

from skillsync.sync.models import SyncReport, TargetOutcome
from skillsync.sync.orchestrator import SyncOrchestrator
from skillsync.sync.secrets import has_potential_secrets, sensitive_env_keys

__all__ = [
    "SyncOrchestrator",
    "SyncReport",
    "TargetOutcome",
    "has_potential_secrets",
    "sensitive_env_keys",
]
