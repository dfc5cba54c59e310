"""Instruction-loading exceptions."""

from __future__ import annotations

from vibechecks.exceptions.base import VibeChecksError


class InstructionsError(VibeChecksError, OSError):
    """Raised when the instructions folder cannot be read."""
