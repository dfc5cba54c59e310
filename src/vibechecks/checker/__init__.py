"""Check orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["VibeChecker"]


def __getattr__(name: str) -> Any:
    """Lazily expose checker APIs to avoid import cycles at package import time."""
    if name == "VibeChecker":
        from .orchestrator import VibeChecker

        return VibeChecker
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
