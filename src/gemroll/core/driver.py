"""
Fixed-rate frame driver.

Runs the simulation tick on the asyncio loop at a nominal rate. The
physics use a fixed timestep, so the driver only paces calls; it
never feeds measured elapsed time into the simulation.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

logger = logging.getLogger(__name__)

# Returns False once there is nothing left to tick (e.g. game over)
TickFn = Callable[[], bool]


class FrameDriver:
    """Schedules ``tick_fn`` every 1/fps seconds on the running loop.

    Only one tick stream exists at a time: ``start()`` cancels the
    in-flight task before creating its replacement.
    """

    def __init__(self, tick_fn: TickFn, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError("fps must be > 0")
        self._tick_fn = tick_fn
        self._interval = 1.0 / fps
        self._task: asyncio.Task[None] | None = None
        self._frame = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def frame(self) -> int:
        """Ticks executed since the driver was created."""
        return self._frame

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """(Re)start ticking. Must be called with an asyncio loop running."""
        self.stop()
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(), name="gemroll-frame-driver")
        logger.debug("Frame driver scheduled")

    def stop(self) -> None:
        """Cancel the current tick stream, if any."""
        if self._task is not None:
            if not self._task.done():
                self._task.cancel()
                logger.debug("Frame driver cancelled")
            self._task = None

    async def wait(self) -> None:
        """Wait until the current tick stream ends on its own."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time()
        try:
            while True:
                keep_going = self._tick_fn()
                self._frame += 1
                if not keep_going:
                    logger.info(f"Frame driver halted after frame {self._frame}")
                    return

                deadline += self._interval
                now = loop.time()
                if deadline < now:
                    # Fell behind; drop the backlog instead of bursting.
                    deadline = now
                await asyncio.sleep(deadline - now)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Tick failed, stopping frame driver")
            raise
