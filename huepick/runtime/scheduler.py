# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Frame schedulers.

A frame scheduler runs a callback at the next paint opportunity. The drag
session requests at most one frame at a time, so input bursts between two
frames collapse into a single delivery.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional, Protocol

FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    """Anything that can run a callback on the next frame."""

    def request(self, callback: FrameCallback) -> None: ...


class ManualFrameScheduler:
    """
    Runs requested callbacks when tick() is called.

    For hosts that drive their own render loop (call tick() once per frame)
    and for tests.
    """

    def __init__(self) -> None:
        self._queue: list[FrameCallback] = []

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for the next tick."""
        return len(self._queue)

    def request(self, callback: FrameCallback) -> None:
        self._queue.append(callback)

    def tick(self) -> int:
        """Run every callback requested before this tick. Returns how many ran."""
        callbacks, self._queue = self._queue, []
        for callback in callbacks:
            callback()
        return len(callbacks)


class AsyncioFrameScheduler:
    """
    Runs requested callbacks on an asyncio event loop after one frame interval.

    Args:
        loop: Event loop to schedule on (default: the running loop at
            request time)
        interval: Frame length in seconds (default: 60 fps)
    """

    def __init__(
        self,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        *,
        interval: float = 1 / 60,
    ) -> None:
        if interval < 0:
            raise ValueError(f"Interval must be >= 0, got {interval}")
        self._loop = loop
        self.interval = interval

    def request(self, callback: FrameCallback) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_later(self.interval, callback)
