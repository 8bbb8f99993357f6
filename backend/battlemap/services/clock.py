"""Periodic playback clock that drives the timeline and feeds the renderer."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from battlemap.logging import get_logger
from battlemap.models import TimelineFrame
from battlemap.services.timeline import TimelineController

logger = get_logger("services.clock")

FrameSink = Callable[[TimelineFrame], Awaitable[None]]


class PlaybackClock:
    """Tick a TimelineController at a fixed cadence and emit each frame.

    The clock owns the cadence; the controller only knows how far one tick
    moves. Stopping the clock leaves the timeline wherever it last was.
    """

    def __init__(
        self,
        controller: TimelineController,
        emit: FrameSink,
        interval_seconds: float = 0.5,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.controller = controller
        self.emit = emit
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.is_running:
            return
        self._task = asyncio.create_task(self._run())
        logger.info("Playback clock started (interval=%.3fs)", self.interval_seconds)

    async def stop(self) -> None:
        task = self._task
        if task is None:
            return
        self._task = None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            # Only the clock task was cancelled here; a cancel aimed at the
            # caller still propagates.
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
        logger.info("Playback clock stopped at t=%.4f", self.controller.time)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            self.controller.tick()
            await publish_frame(self.controller, self.emit)


async def publish_frame(controller: TimelineController, sink: FrameSink) -> TimelineFrame:
    """
    Send the current frame to the sink and return it.

    A failing sink is logged and never undoes or hides the state change that
    produced the frame.

    :param controller: Timeline to read the frame from
    :type controller: TimelineController
    :param sink: Renderer callback
    :type sink: FrameSink
    :return: The frame that was sent
    :rtype: TimelineFrame
    """
    frame = controller.snapshot()
    try:
        await sink(frame)
    except Exception:
        logger.exception("Frame emit failed at t=%.4f", frame.time)
    return frame
