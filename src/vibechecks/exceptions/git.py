"""Git interaction exceptions."""

from __future__ import annotations

from vibechecks.exceptions.base import VibeChecksError


class GitError(VibeChecksError, RuntimeError):
    """Raised when a git command fails or git is unavailable."""
