"""Configuration loading and normalization for vibechecks.

This package facade re-exports the public names so callers can write
``from vibechecks.config import ...``.
"""

from __future__ import annotations

from vibechecks.config.loader import load_config
from vibechecks.config.model import VibeChecksConfig, resolve_workspace_path

__all__ = [
    "VibeChecksConfig",
    "load_config",
    "resolve_workspace_path",
]
