# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Pointer tracking and drag sessions.

Converts raw pointer / touch input into element-relative, bounds-clamped
positions, and runs press → move → release drag sessions on an element.

Drag session protocol:
- press: captures the pointer exclusively and delivers the press position
  immediately. A press while a session is active is ignored.
- move: only the captured pointer counts. Each move recomputes the
  position; delivery waits for the next frame, and only the latest
  position of the frame is delivered.
- release: delivers any position still waiting for its frame, stops
  listening, and calls on_end exactly once.
- close: tears down listeners and releases the capture, even mid-drag.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from huepick.schema import Position
from huepick.color.colorspace import clamp, round_half_up
from huepick.runtime.events import (
    POINTER_DOWN,
    POINTER_MOVE,
    POINTER_UP,
    InputEvent,
    PointerTarget,
    TouchEvent,
)
from huepick.runtime.scheduler import FrameScheduler

logger = logging.getLogger(__name__)

DragCallback = Callable[[Position], None]
EndCallback = Callable[[], None]


def get_cursor_position(event: InputEvent, element: PointerTarget) -> Position:
    """
    Position of an event relative to an element.

    Touch events use the first active touch, falling back to the first
    changed touch (release events have no active touches left).

    Returns:
        Position rounded to whole pixels and clamped to
        [0, client_width] × [0, client_height].
    """
    rect = element.bounding_rect()

    client_x, client_y = 0.0, 0.0
    if isinstance(event, TouchEvent):
        touch = event.primary
        if touch is not None:
            client_x, client_y = touch.client_x, touch.client_y
    else:
        client_x, client_y = event.client_x, event.client_y

    x = clamp(round_half_up(client_x - rect.left), 0, element.client_width)
    y = clamp(round_half_up(client_y - rect.top), 0, element.client_height)
    return Position(x, y)


class DragSession:
    """
    Drag tracking for one element.

    Listens for presses on the element (and on any marker elements placed
    over it) until closed. Each press starts a session that lasts until the
    same pointer is released.

    Args:
        element: Element whose geometry defines the coordinate space
        on_drag: Called with each delivered Position
        on_end: Called once when a session ends by release
        scheduler: Frame scheduler used to coalesce move deliveries
        markers: Extra elements that start a session when pressed

    Usage:
        session = DragSession(element, on_drag, scheduler=scheduler)
        ...
        session.close()
    """

    def __init__(
        self,
        element: PointerTarget,
        on_drag: DragCallback,
        on_end: Optional[EndCallback] = None,
        *,
        scheduler: FrameScheduler,
        markers: Iterable[PointerTarget] = (),
    ) -> None:
        self.element = element
        self._on_drag = on_drag
        self._on_end = on_end
        self._scheduler = scheduler
        self._markers = tuple(markers)

        self.active = False
        self.pointer_id: Optional[int] = None
        self._pending: Optional[Position] = None
        self._frame_requested = False
        self._closed = False

        element.add_listener(POINTER_DOWN, self._handle_down)
        for marker in self._markers:
            marker.add_listener(POINTER_DOWN, self._handle_down)

    def __enter__(self) -> DragSession:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    # -- event handlers -----------------------------------------------------

    def _handle_down(self, event: InputEvent) -> None:
        if self.active or self._closed:
            logger.debug("Ignoring press from pointer %s: session busy", event.pointer_id)
            return

        self.active = True
        self.pointer_id = event.pointer_id
        self.element.set_pointer_capture(event.pointer_id)
        self.element.add_listener(POINTER_MOVE, self._handle_move)
        self.element.add_listener(POINTER_UP, self._handle_up)
        logger.debug("Drag started by pointer %s", self.pointer_id)

        self._on_drag(get_cursor_position(event, self.element))

    def _handle_move(self, event: InputEvent) -> None:
        if not self.active or event.pointer_id != self.pointer_id:
            return

        self._pending = get_cursor_position(event, self.element)
        if not self._frame_requested:
            self._frame_requested = True
            self._scheduler.request(self._flush)

    def _handle_up(self, event: InputEvent) -> None:
        if not self.active or event.pointer_id != self.pointer_id:
            return

        pending, self._pending = self._pending, None
        if pending is not None:
            self._on_drag(pending)

        self._stop()
        logger.debug("Drag ended by pointer %s", event.pointer_id)
        if self._on_end is not None:
            self._on_end()

    def _flush(self) -> None:
        self._frame_requested = False
        pending, self._pending = self._pending, None
        if pending is not None and self.active:
            self._on_drag(pending)

    # -- teardown -----------------------------------------------------------

    def _stop(self) -> None:
        """End the current session: release capture and move/up listeners."""
        self.element.remove_listener(POINTER_MOVE, self._handle_move)
        self.element.remove_listener(POINTER_UP, self._handle_up)
        if self.pointer_id is not None:
            self.element.release_pointer_capture(self.pointer_id)
        self.active = False
        self.pointer_id = None

    def close(self) -> None:
        """
        Stop tracking the element.

        An active session is abandoned: listeners are removed, the captured
        pointer is released, any undelivered position is dropped and on_end
        is not called. Safe to call more than once.
        """
        if self._closed:
            return
        self._closed = True

        self.element.remove_listener(POINTER_DOWN, self._handle_down)
        for marker in self._markers:
            marker.remove_listener(POINTER_DOWN, self._handle_down)

        self._pending = None
        if self.active:
            logger.debug("Drag by pointer %s abandoned on close", self.pointer_id)
            self._stop()


def setup_dragging(
    element: PointerTarget,
    on_drag: DragCallback,
    on_end: Optional[EndCallback] = None,
    *,
    scheduler: FrameScheduler,
    markers: Iterable[PointerTarget] = (),
) -> Callable[[], None]:
    """
    Start drag tracking on an element.

    Returns:
        Cleanup function that stops tracking (see DragSession.close).
    """
    session = DragSession(
        element,
        on_drag,
        on_end,
        scheduler=scheduler,
        markers=markers,
    )
    return session.close
