# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Input events and the element contract used by the pointer tracker.

Hosts translate their native input into PointerEvent / TouchEvent values
and expose their widgets through the PointerTarget protocol.
HeadlessElement is a complete in-process implementation of that protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Union


POINTER_DOWN = "pointerdown"
POINTER_MOVE = "pointermove"
POINTER_UP = "pointerup"


@dataclass(frozen=True, slots=True)
class Rect:
    """Element bounding box in client coordinates."""
    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """
    A mouse, pen or pointer event.

    Attributes:
        type: Event type (POINTER_DOWN, POINTER_MOVE or POINTER_UP)
        pointer_id: Identifier of the pointer that fired the event
        client_x, client_y: Position in client coordinates
    """
    type: str
    pointer_id: int
    client_x: float
    client_y: float


@dataclass(frozen=True, slots=True)
class Touch:
    """One touch point."""
    identifier: int
    client_x: float
    client_y: float


@dataclass(frozen=True, slots=True)
class TouchEvent:
    """
    A touch event.

    Attributes:
        type: Event type (POINTER_DOWN, POINTER_MOVE or POINTER_UP)
        touches: Touches still on the surface
        changed_touches: Touches that changed in this event (on release,
            the lifted touch is only here)
    """
    type: str
    touches: tuple[Touch, ...] = ()
    changed_touches: tuple[Touch, ...] = ()

    @property
    def primary(self) -> Optional[Touch]:
        """First active touch, falling back to the first changed touch."""
        if self.touches:
            return self.touches[0]
        if self.changed_touches:
            return self.changed_touches[0]
        return None

    @property
    def pointer_id(self) -> Optional[int]:
        """Identifier of the primary touch."""
        touch = self.primary
        return touch.identifier if touch is not None else None


InputEvent = Union[PointerEvent, TouchEvent]
Listener = Callable[[InputEvent], None]


class PointerTarget(Protocol):
    """What the pointer tracker needs from a host element."""

    @property
    def client_width(self) -> float: ...

    @property
    def client_height(self) -> float: ...

    def bounding_rect(self) -> Rect: ...

    def add_listener(self, event_type: str, listener: Listener) -> None: ...

    def remove_listener(self, event_type: str, listener: Listener) -> None: ...

    def set_pointer_capture(self, pointer_id: int) -> None: ...

    def release_pointer_capture(self, pointer_id: int) -> None: ...


class HeadlessElement:
    """
    An in-process PointerTarget.

    Listener registration follows DOM rules: adding the same listener twice
    for one event type is a no-op, and a listener removed during dispatch
    is not called.
    """

    def __init__(
        self,
        width: float,
        height: float,
        *,
        left: float = 0,
        top: float = 0,
    ) -> None:
        self.rect = Rect(left, top, width, height)
        self.captured: set[int] = set()
        self._listeners: dict[str, list[Listener]] = {}

    @property
    def client_width(self) -> float:
        return self.rect.width

    @property
    def client_height(self) -> float:
        return self.rect.height

    def bounding_rect(self) -> Rect:
        return self.rect

    def add_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event_type: Optional[str] = None) -> int:
        """Number of registered listeners, for one type or in total."""
        if event_type is not None:
            return len(self._listeners.get(event_type, []))
        return sum(len(listeners) for listeners in self._listeners.values())

    def set_pointer_capture(self, pointer_id: int) -> None:
        self.captured.add(pointer_id)

    def release_pointer_capture(self, pointer_id: int) -> None:
        self.captured.discard(pointer_id)

    def dispatch(self, event: InputEvent) -> None:
        """Deliver an event to the listeners registered for its type."""
        listeners = self._listeners.get(event.type, [])
        for listener in list(listeners):
            if listener in listeners:
                listener(event)
