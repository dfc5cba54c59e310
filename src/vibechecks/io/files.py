"""Content hashing helpers."""

from __future__ import annotations

import hashlib


def text_sha256(text: str) -> str:
    """Return SHA-256 hex digest of UTF-8 encoded text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
