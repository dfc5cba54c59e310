"""Fingerprint cache: persisted model responses keyed by workspace-relative path.

An entry is reusable only while both the instructions digest and the file
digest still match. The whole map is rewritten on every mutation; read and
write failures are logged and otherwise ignored so caching never blocks a
check.
"""

from __future__ import annotations

import logging
from pathlib import Path

from vibechecks.constants.cache import CACHE_TEMP_PREFIX, CACHE_TEMP_SUFFIX, CACHE_VERSION
from vibechecks.io import load_json_file, write_json_atomic
from vibechecks.types import CacheEntry, CachePayload

logger = logging.getLogger(__name__)


def new_cache() -> CachePayload:
    """Return an empty cache payload."""
    return {
        "version": CACHE_VERSION,
        "entries": {},
    }


def load_cache(cache_path: Path) -> CachePayload:
    """Load cache file if valid, otherwise return a new cache payload."""
    try:
        if not cache_path.is_file():
            return new_cache()
        payload = load_json_file(cache_path)
    except (OSError, ValueError, RecursionError) as exc:
        logger.debug("Ignoring unreadable cache file %s: %s", cache_path, exc)
        return new_cache()

    if not isinstance(payload, dict):
        return new_cache()

    version = payload.get("version")
    if version == CACHE_VERSION:
        return {"version": CACHE_VERSION, "entries": _normalize_entries(payload.get("entries"))}
    if version is None:
        return _migrate_flat_payload(payload)
    return new_cache()


def save_cache(cache_path: Path, payload: CachePayload) -> None:
    """Persist cache to disk atomically."""
    write_json_atomic(
        path=cache_path,
        payload=payload,
        temp_prefix=CACHE_TEMP_PREFIX,
        temp_suffix=CACHE_TEMP_SUFFIX,
    )


def is_cache_hit(entry: CacheEntry | None, *, instructions_hash: str, file_hash: str) -> bool:
    """Return True when both digests of the cached entry match the current inputs."""
    if entry is None:
        return False
    return entry["instructionsHash"] == instructions_hash and entry["fileHash"] == file_hash


def _migrate_flat_payload(payload: dict[object, object]) -> CachePayload:
    # Unversioned artifacts are a bare ``{key: entry}`` map.
    return {"version": CACHE_VERSION, "entries": _normalize_entries(payload)}


def _normalize_entries(raw_entries: object) -> dict[str, CacheEntry]:
    if not isinstance(raw_entries, dict):
        return {}

    entries: dict[str, CacheEntry] = {}
    for key, value in raw_entries.items():
        if not isinstance(key, str) or not isinstance(value, dict):
            continue

        instructions_hash = value.get("instructionsHash")
        file_hash = value.get("fileHash")
        response = value.get("response")

        if not isinstance(instructions_hash, str):
            continue
        if not isinstance(file_hash, str):
            continue
        if not isinstance(response, str):
            continue

        entries[key] = {
            "instructionsHash": instructions_hash,
            "fileHash": file_hash,
            "response": response,
        }
    return entries


class FingerprintCache:
    """In-memory cache map mirrored to a single JSON artifact.

    ``path=None`` keeps the cache in memory only.
    """

    def __init__(self, path: Path | None) -> None:
        self._path = path
        self._payload = load_cache(path) if path is not None else new_cache()
        logger.debug("Loaded %d cache entries from %s", len(self._payload["entries"]), path)

    @property
    def path(self) -> Path | None:
        return self._path

    def __len__(self) -> int:
        return len(self._payload["entries"])

    def __contains__(self, key: object) -> bool:
        return key in self._payload["entries"]

    def get(self, key: str) -> CacheEntry | None:
        """Return the cached entry for ``key`` without side effects."""
        return self._payload["entries"].get(key)

    def set(self, key: str, entry: CacheEntry) -> None:
        """Store ``entry`` under ``key`` and flush the whole map."""
        self._payload["entries"][key] = entry
        self._flush()

    def clear(self) -> None:
        """Drop every entry and flush the empty map."""
        self._payload["entries"].clear()
        self._flush()

    def delete_file(self) -> None:
        """Remove the backing artifact; a missing file is not an error."""
        if self._path is None:
            return
        try:
            self._path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            logger.warning("Failed to delete cache file %s: %s", self._path, exc)

    def _flush(self) -> None:
        if self._path is None:
            return
        try:
            save_cache(self._path, self._payload)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Failed to persist cache to %s: %s", self._path, exc)
