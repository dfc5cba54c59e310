"""Restart-on-event timer that coalesces bursts of change events."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class Debouncer:
    """Run ``callback`` once ``delay`` seconds after the last ``trigger``.

    A trigger arriving before the timer fires cancels and reschedules it. A
    callback that already started is never cancelled; the next trigger simply
    schedules another run.
    """

    def __init__(self, delay: float, callback: Callable[..., Awaitable[Any]]) -> None:
        self.delay = delay
        self._callback = callback
        self._pending: asyncio.Task[None] | None = None
        self._running: set[asyncio.Task[Any]] = set()

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def trigger(self, *args: Any) -> None:
        """Schedule the callback, replacing any timer that has not fired yet."""
        self.cancel()
        self._pending = asyncio.get_running_loop().create_task(self._fire_later(args))

    def cancel(self) -> None:
        """Drop the pending timer, if any."""
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    async def wait(self) -> None:
        """Wait for the scheduled firing and every callback it started."""
        if self._pending is not None:
            await asyncio.gather(self._pending, return_exceptions=True)
        if self._running:
            await asyncio.gather(*self._running, return_exceptions=True)

    async def _fire_later(self, args: tuple[Any, ...]) -> None:
        await asyncio.sleep(self.delay)
        # Detach the callback so a later trigger cannot cancel it mid-flight.
        task = asyncio.get_running_loop().create_task(self._run(args))
        self._running.add(task)
        task.add_done_callback(self._running.discard)

    async def _run(self, args: tuple[Any, ...]) -> None:
        try:
            await self._callback(*args)
        except Exception:
            logger.exception("Debounced check failed")
