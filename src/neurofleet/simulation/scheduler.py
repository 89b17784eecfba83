"""Periodic simulation task.

The task fires every ``interval`` seconds whether or not simulation mode
is on; the engine turns ticks into no-ops while it is off. A tick runs
synchronously between awaits, so cancelling the task never interrupts a
tick that has begun.

Two ways to drive it:

* ``start()`` schedules an asyncio task that sleeps and ticks forever,
  until ``stop()`` or ``cancel()``.
* ``poll()`` runs every tick that is due according to the injected clock.
  Tests pair it with a manual clock to advance virtual time.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import math
import time
from collections.abc import Awaitable, Callable

from neurofleet.exceptions import FleetConfigError
from neurofleet.simulation.engine import SimulationEngine, TickResult
from neurofleet.state.store import FleetStore

_logger = logging.getLogger(__name__)


class SimulationTask:
    def __init__(
        self,
        store: FleetStore,
        engine: SimulationEngine,
        *,
        interval: float | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        self._store = store
        self._engine = engine
        self._interval = interval if interval is not None else store.config.tick_interval
        if not math.isfinite(self._interval) or self._interval <= 0:
            raise FleetConfigError(f"interval must be positive, got {self._interval}")
        self._clock = clock
        self._sleep = sleep
        self._task: asyncio.Task[None] | None = None
        self._next_due = clock() + self._interval
        self._ticks = 0
        self._last_result: TickResult | None = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def ticks(self) -> int:
        """Number of times the task has fired, including no-op ticks."""
        return self._ticks

    @property
    def last_result(self) -> TickResult | None:
        return self._last_result

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def _fire(self) -> TickResult:
        result = self._engine.step(self._store)
        self._ticks += 1
        self._last_result = result
        return result

    def poll(self) -> list[TickResult]:
        """Run every tick due by the clock's current reading."""
        now = self._clock()
        results: list[TickResult] = []
        while now >= self._next_due:
            results.append(self._fire())
            self._next_due += self._interval
        return results

    async def _run(self) -> None:
        while True:
            await self._sleep(self._interval)
            self._next_due = self._clock() + self._interval
            self._fire()

    def start(self) -> None:
        """Schedule the periodic task on the running loop. No-op if already running."""
        if self.is_running:
            return
        self._next_due = self._clock() + self._interval
        self._task = asyncio.get_running_loop().create_task(self._run())
        _logger.debug("Simulation task started interval=%.2fs", self._interval)

    def cancel(self) -> None:
        """Request cancellation without waiting for it."""
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()

    async def stop(self) -> None:
        """Cancel the task and wait until it has finished."""
        task = self._task
        self.cancel()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task
            _logger.debug("Simulation task stopped after %d ticks", self._ticks)
