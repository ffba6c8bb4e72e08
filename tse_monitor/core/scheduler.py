"""Serialized, cancellable periodic runner for refresh ticks."""

import asyncio
from typing import Awaitable, Callable, Optional


class RecurringTask:
    """
    Run a tick function on a fixed interval.

    A tick runs to completion before the next interval starts counting,
    so two ticks never overlap however slow one of them is. A failing
    tick is handed to on_error and the schedule carries on.

    Usage:
        task = RecurringTask(tick, interval=30, on_error=report)
        await task.run()      # until task.cancel() or max_ticks
    """

    def __init__(
        self,
        tick: Callable[[], Awaitable[None]],
        interval: float,
        on_error: Optional[Callable[[int, Exception], None]] = None,
        max_ticks: Optional[int] = None
    ):
        if interval < 0:
            raise ValueError("interval must not be negative")
        self.tick = tick
        self.interval = interval
        self.on_error = on_error
        self.max_ticks = max_ticks

        self.ticks_run = 0
        self.failures = 0
        self._cancelled = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self):
        """Stop after the current tick; interrupts a pending wait at once."""
        self._cancelled.set()

    async def run(self):
        while not self._done():
            if await self._wait_interval():
                break

            self.ticks_run += 1
            try:
                await self.tick()
            except Exception as e:
                self.failures += 1
                if self.on_error:
                    self.on_error(self.ticks_run, e)

    def _done(self) -> bool:
        if self.cancelled:
            return True
        return self.max_ticks is not None and self.ticks_run >= self.max_ticks

    async def _wait_interval(self) -> bool:
        """Wait one interval. True if cancelled meanwhile."""
        try:
            await asyncio.wait_for(self._cancelled.wait(), timeout=self.interval)
        except asyncio.TimeoutError:
            return False
        return True
