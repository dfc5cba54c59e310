"""Poll-based file watching that feeds save/change events into checks."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from vibechecks.checker.debounce import Debouncer
from vibechecks.checker.documents import open_document
from vibechecks.checker.orchestrator import VibeChecker
from vibechecks.constants.config import DEFAULT_POLL_INTERVAL_SECONDS, RUN_ON_CHANGE, RUN_ON_OPEN

logger = logging.getLogger(__name__)


def _mtime_ns(path: Path) -> int | None:
    try:
        return path.stat().st_mtime_ns
    except OSError:
        return None


class FileWatcher:
    """Report files whose modification time changed since the previous poll."""

    def __init__(self, paths: Sequence[Path]) -> None:
        self._mtimes = {path: _mtime_ns(path) for path in paths}

    def poll(self) -> list[Path]:
        changed: list[Path] = []
        for path, previous in self._mtimes.items():
            current = _mtime_ns(path)
            if current != previous:
                self._mtimes[path] = current
                if current is not None:
                    changed.append(path)
        return changed


async def watch_files(
    checker: VibeChecker,
    paths: Sequence[Path],
    *,
    interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
    stop: asyncio.Event | None = None,
) -> None:
    """Check ``paths`` whenever they change until ``stop`` is set.

    With ``run_on: on_change`` bursts of writes are coalesced per file through
    a debounce timer; any other trigger checks on every detected write.
    """
    stop = stop or asyncio.Event()
    config = checker.config

    async def run(path: Path) -> None:
        try:
            document = open_document(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not open %s: %s", path, exc)
            return
        await checker.check_document(document)

    debouncers = {path: Debouncer(config.debounce_seconds, run) for path in paths}

    if config.run_on == RUN_ON_OPEN:
        for path in paths:
            await run(path)

    watcher = FileWatcher(paths)
    try:
        while not stop.is_set():
            for path in watcher.poll():
                if config.run_on == RUN_ON_CHANGE:
                    debouncers[path].trigger(path)
                else:
                    await run(path)
            try:
                await asyncio.wait_for(stop.wait(), timeout=interval)
            except TimeoutError:
                pass
    finally:
        for debouncer in debouncers.values():
            debouncer.cancel()
        await asyncio.gather(*(debouncer.wait() for debouncer in debouncers.values()))
