# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Headless picker controllers.

Each controller owns one input surface of a picker, maps drag positions to
state changes through the gradient sampler, and tracks where its marker
should be drawn. Rendering the marker is left to the host.

- PlaneController: saturation/value plane → color
- StripController: hue strip → hue
- OpacityController: opacity track → opacity
- Slider: generic numeric slider mapping
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from huepick.schema import Position
from huepick.color.colorspace import clamp, rgb_to_string, round_half_up
from huepick.color.parse import change_hue, change_opacity, parse_color
from huepick.surface import (
    Surface,
    color_to_position,
    hue_to_position,
    paint_plane,
    paint_strip,
    position_to_color,
    position_to_hue,
)
from huepick.runtime.events import PointerTarget
from huepick.runtime.pointer import DragSession
from huepick.runtime.scheduler import FrameScheduler
from huepick.runtime.state import HUE, OPACITY, PickerState


class _Controller:
    """Drag wiring shared by the controllers."""

    def __init__(self, state: PickerState) -> None:
        self.state = state
        self.dragging = False
        self._session: Optional[DragSession] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    def drag(self, position: Position) -> None:
        """Handle one delivered drag position. Subclasses must override."""
        raise NotImplementedError

    def end_drag(self) -> None:
        self.dragging = False

    def bind(
        self,
        element: PointerTarget,
        *,
        scheduler: FrameScheduler,
        markers: Iterable[PointerTarget] = (),
    ) -> DragSession:
        """Route drags on an element to this controller."""
        if self._session is not None:
            self._session.close()
        self._session = DragSession(
            element,
            self.drag,
            self.end_drag,
            scheduler=scheduler,
            markers=markers,
        )
        return self._session

    def close(self) -> None:
        """Stop listening to the element and to the shared state."""
        if self._session is not None:
            self._session.close()
            self._session = None
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None


class PlaneController(_Controller):
    """
    Saturation/value plane.

    Paints the plane for the current hue, repaints it and re-hues the
    current color whenever the hue changes, and turns drags into colors.
    """

    def __init__(self, state: PickerState, surface: Surface) -> None:
        super().__init__(state)
        self.surface = surface
        self.marker: Optional[Position] = None
        self._located = False

        paint_plane(surface, state.hue)
        self.locate()
        self._unsubscribe = state.subscribe(self._on_state_change)

    def _on_state_change(self, state: PickerState, field: str) -> None:
        if field == HUE:
            paint_plane(self.surface, state.hue)
            state.set_color(change_hue(state.color, state.hue))

    def locate(self) -> Optional[Position]:
        """
        Place the marker on the pixel closest to the current color.

        Runs the full-surface search, so it only happens once; later calls
        return the current marker.
        """
        if self._located or not self.surface.is_ready:
            return self.marker

        self._located = True
        rgb = parse_color(self.state.color).rgb
        position = color_to_position(self.surface, rgb_to_string(rgb))
        if position is not None:
            self.marker = position
        return self.marker

    def drag(self, position: Position) -> None:
        x = clamp(position.x, 0, self.surface.width - 1)
        y = clamp(position.y, 0, self.surface.height - 1)
        self.marker = Position(x, y)
        self.dragging = True

        color = position_to_color(self.surface, x, y)
        if color is not None:
            self.state.set_color(color)


class StripController(_Controller):
    """Hue strip. Painted once; drags set the hue."""

    def __init__(self, state: PickerState, surface: Surface) -> None:
        super().__init__(state)
        self.surface = surface

        paint_strip(surface)
        self.marker_x: Optional[float] = hue_to_position(surface.width, state.hue)

    def drag(self, position: Position) -> None:
        self.marker_x = position.x
        self.dragging = True

        hue = position_to_hue(self.surface.width, position.x)
        if hue is not None:
            self.state.set_hue(hue)


class OpacityController(_Controller):
    """
    Opacity track of a given width.

    Drags set the opacity (x / width); an opacity change rewrites the
    current color as rgba() with the new alpha.
    """

    def __init__(self, state: PickerState, width: float) -> None:
        super().__init__(state)
        self.width = width
        self.marker_x = width * state.opacity
        self._unsubscribe = state.subscribe(self._on_state_change)

    def _on_state_change(self, state: PickerState, field: str) -> None:
        if field == OPACITY:
            state.set_color(change_opacity(state.color, state.opacity))

    def drag(self, position: Position) -> None:
        x = clamp(position.x, 0, self.width)
        self.marker_x = x
        self.dragging = True

        if self.width > 0:
            self.state.set_opacity(x / self.width)


@dataclass(frozen=True)
class Slider:
    """
    Numeric slider mapping between track positions and values.

    Attributes:
        minimum: Value at the start of the track
        maximum: Value at the end of the track
        step: Values snap to multiples of step
        orientation: "horizontal" (start = left) or "vertical" (start = bottom)
    """

    minimum: float = 0
    maximum: float = 100
    step: float = 1
    orientation: str = "horizontal"

    def __post_init__(self) -> None:
        if self.maximum <= self.minimum:
            raise ValueError(
                f"Slider maximum must exceed minimum, got {self.minimum}..{self.maximum}"
            )
        if self.step <= 0:
            raise ValueError(f"Slider step must be > 0, got {self.step}")
        if self.orientation not in ("horizontal", "vertical"):
            raise ValueError(f"Unknown slider orientation: {self.orientation!r}")

    def percentage(self, value: float) -> float:
        """Fill percentage (0-100) of the track for a value."""
        return clamp((value - self.minimum) / (self.maximum - self.minimum) * 100, 0, 100)

    def value_at(self, position: Position, width: float, height: float) -> float:
        """Value for a position on a track of the given size."""
        if self.orientation == "horizontal":
            return slider_value(
                position.x, width,
                minimum=self.minimum, maximum=self.maximum, step=self.step,
            )
        return slider_value(
            height - position.y, height,
            minimum=self.minimum, maximum=self.maximum, step=self.step,
        )


def slider_value(
    position: float,
    track_size: float,
    *,
    minimum: float = 0,
    maximum: float = 100,
    step: float = 1,
) -> float:
    """
    Map a track position to a stepped value in [minimum, maximum].

    The position is clamped to the track, scaled into the range, snapped to
    the nearest step (halves round up) and clamped again.
    """
    if track_size <= 0:
        return minimum
    percent = clamp(position / track_size * 100, 0, 100)
    raw = minimum + percent / 100 * (maximum - minimum)
    stepped = round_half_up(raw / step) * step
    return clamp(stepped, minimum, maximum)
