"""
Ticker: asyncio tick loop driving an AnimationService.

Delivers Tick actions at the configured FPS while at least one subject has
requested a tick, then parks until a new dispatch wakes it up. Deltas are
measured with a monotonic clock; the first tick after waking has a zero
delta so a keyframe starts counting from the moment it is first ticked.
"""

from __future__ import annotations
import asyncio
import time
from typing import Callable, Dict, List, Optional

from engine.render import RenderedPair
from models.enums import LogCategory
from services.animation_service import AnimationService, SubjectID
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.TICKER)

FrameCallback = Callable[[Dict[SubjectID, List[RenderedPair]]], None]


class Ticker:
    """
    Example:
        ticker = Ticker(service, on_frame=lambda frames: print(frames))
        await ticker.start()
        service.dispatch("card", action)     # wakes the loop
        await ticker.run_until_idle()
        await ticker.stop()
    """

    def __init__(
        self,
        service: AnimationService,
        fps: Optional[int] = None,
        on_frame: Optional[FrameCallback] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        """
        Args:
            service: Subjects to tick
            fps: Tick rate (1-240); defaults to the service config
            on_frame: Receives every subject's rendered pairs after each tick
            clock: Seconds, monotonic
        """
        self.service = service
        self.fps = max(1, min(fps or service.config.fps, 240))
        self.on_frame = on_frame
        self.clock = clock

        self.running = False
        self.ticks = 0
        self.tick_task: Optional[asyncio.Task] = None
        self._wake: Optional[asyncio.Event] = None
        self._last_tick: Optional[float] = None

        service.on_tick_requested = self.wake

    def wake(self) -> None:
        """Resume ticking (called by the service when a subject requests a tick)."""
        if self._wake is not None:
            self._wake.set()

    async def start(self) -> None:
        """Start the tick loop."""
        if self.running:
            log.warn("Ticker already running")
            return

        self.running = True
        # Bound to the running loop
        self._wake = asyncio.Event()
        if self.service.needs_tick:
            self._wake.set()
        self.tick_task = asyncio.create_task(self._tick_loop())
        log.info(f"Tick loop started @ {self.fps} FPS")

    async def stop(self) -> None:
        """Stop the tick loop."""
        if not self.running:
            return
        self.running = False
        if self.tick_task:
            self.tick_task.cancel()
            try:
                await self.tick_task
            except asyncio.CancelledError:
                pass
            self.tick_task = None

        log.info("Ticker stopped", ticks=self.ticks)

    async def run_until_idle(self, timeout: Optional[float] = None) -> None:
        """
        Wait until no subject requests ticks.

        Raises:
            asyncio.TimeoutError: still animating after timeout seconds
        """
        async def _wait():
            while self.service.needs_tick:
                await asyncio.sleep(1.0 / self.fps)

        await asyncio.wait_for(_wait(), timeout)

    # === Core Tick Loop ===

    async def _tick_loop(self) -> None:
        """Main tick loop @ target FPS."""
        frame_delay = 1.0 / self.fps

        while self.running:
            if not self.service.needs_tick:
                # Idle: park until a dispatch asks for ticks again
                self._wake.clear()
                self._last_tick = None
                log.debug("All subjects idle, waiting")
                await self._wake.wait()
                continue

            now = self.clock()
            delta_ms = 0.0 if self._last_tick is None else (now - self._last_tick) * 1000
            self._last_tick = now

            try:
                self.service.tick(delta_ms)
                self.ticks += 1
                if self.on_frame:
                    self.on_frame(self.service.render_all())
            except Exception as e:
                log.error(f"Tick error: {e}", error_type=type(e).__name__)

            await asyncio.sleep(frame_delay)
