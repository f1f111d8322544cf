# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Interactive runtime for Huepick.

Pointer tracking and drag sessions, frame scheduling, the shared picker
state, and the headless controllers that connect input to the sampler:

1. Pointer input -- get_cursor_position, DragSession, setup_dragging
2. Scheduling -- ManualFrameScheduler, AsyncioFrameScheduler
3. Picker glue -- PickerState plus plane / strip / opacity controllers

The runtime never draws; hosts render markers from controller state.
"""

from huepick.runtime.events import (
    POINTER_DOWN,
    POINTER_MOVE,
    POINTER_UP,
    HeadlessElement,
    PointerEvent,
    PointerTarget,
    Rect,
    Touch,
    TouchEvent,
)
from huepick.runtime.scheduler import (
    AsyncioFrameScheduler,
    FrameScheduler,
    ManualFrameScheduler,
)
from huepick.runtime.pointer import DragSession, get_cursor_position, setup_dragging
from huepick.runtime.state import PickerConfig, PickerState
from huepick.runtime.controllers import (
    OpacityController,
    PlaneController,
    Slider,
    StripController,
    slider_value,
)

__all__ = [
    # Events
    "POINTER_DOWN",
    "POINTER_MOVE",
    "POINTER_UP",
    "PointerEvent",
    "Touch",
    "TouchEvent",
    "Rect",
    "PointerTarget",
    "HeadlessElement",
    # Scheduling
    "FrameScheduler",
    "ManualFrameScheduler",
    "AsyncioFrameScheduler",
    # Pointer tracking
    "get_cursor_position",
    "DragSession",
    "setup_dragging",
    # Picker
    "PickerConfig",
    "PickerState",
    "PlaneController",
    "StripController",
    "OpacityController",
    "Slider",
    "slider_value",
]
