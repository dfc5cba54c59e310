"""Shared exception hierarchy for vibechecks."""

from __future__ import annotations

from .base import VibeChecksError
from .config import ConfigError
from .git import GitError
from .instructions import InstructionsError
from .oracle import ModelNotFoundError, OracleError, PromptTooLargeError

__all__ = [
    "ConfigError",
    "GitError",
    "InstructionsError",
    "ModelNotFoundError",
    "OracleError",
    "PromptTooLargeError",
    "VibeChecksError",
]
