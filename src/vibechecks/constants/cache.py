"""Constants used by the fingerprint cache and hashing."""

from __future__ import annotations

CACHE_VERSION: int = 2
CACHE_DIRNAME: str = ".vibe-checks-cache"
CACHE_FILENAME: str = "vibe-checks-cache.json"
CACHE_TEMP_PREFIX: str = ".cache-"
CACHE_TEMP_SUFFIX: str = ".tmp"
