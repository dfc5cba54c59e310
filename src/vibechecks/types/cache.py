"""Typed cache payload structures."""

from __future__ import annotations

from typing import TypedDict


class CacheEntry(TypedDict):
    """Cached model verdict for a single file.

    Keys keep the camelCase spelling of the persisted artifact.
    """

    instructionsHash: str
    fileHash: str
    response: str


class CachePayload(TypedDict):
    """Top-level cache payload persisted to disk."""

    version: int
    entries: dict[str, CacheEntry]
