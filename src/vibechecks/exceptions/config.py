"""Configuration-related exceptions."""

from __future__ import annotations

from vibechecks.exceptions.base import VibeChecksError


class ConfigError(VibeChecksError, ValueError):
    """Raised when checker configuration is invalid or incomplete."""
