"""Base exception type."""

from __future__ import annotations


class VibeChecksError(Exception):
    """Base class for all vibechecks errors."""
