# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Shared picker state.

One PickerState is shared by reference between the plane, the strip and
the opacity controller of a picker. Every mutation goes through a setter;
setters that change a value notify the registered observers, then the
picker-level on_change callback.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from huepick.color.colorspace import rgb_to_string
from huepick.color.css import resolve
from huepick.color.parse import Resolver, parse_color

Observer = Callable[["PickerState", str], None]
ChangeCallback = Callable[[str, float, float], None]

HUE = "hue"
COLOR = "color"
OPACITY = "opacity"


@dataclass(frozen=True)
class PickerConfig:
    """Configuration for a picker."""

    # Initial color; its hue seeds the strip and its alpha seeds the opacity
    default_color: str = "rgb(255,255,255)"


class PickerState:
    """
    Hue, color and opacity shared across one picker's surfaces.

    Args:
        on_change: Called as on_change(color, opacity, hue) once per
            setter call that changed a value, after all observers have run.
            Setter calls made by observers do not fire it again.
        config: Picker configuration (uses defaults if None)
        resolver: Color-string oracle used to parse the default color

    Raises:
        UnparsableColor: If the default color cannot be parsed.

    Example:
        >>> state = PickerState(config=PickerConfig(default_color="#ff000080"))
        >>> state.color, state.opacity, state.hue
        ('rgb(255, 0, 0)', 0.5019607843137255, 0.0)
    """

    def __init__(
        self,
        on_change: Optional[ChangeCallback] = None,
        *,
        config: Optional[PickerConfig] = None,
        resolver: Resolver = resolve,
    ) -> None:
        cfg = config or PickerConfig()
        parsed = parse_color(cfg.default_color, resolver=resolver)

        self._hue = float(parsed.hsl.h)
        self._color = rgb_to_string(parsed.rgb)
        self._opacity = float(parsed.rgb.a)

        self._on_change = on_change
        self._observers: list[Observer] = []
        self._depth = 0

    def __repr__(self) -> str:
        return (
            f"PickerState(hue={self._hue}, color={self._color!r}, "
            f"opacity={self._opacity})"
        )

    @property
    def hue(self) -> float:
        return self._hue

    @property
    def color(self) -> str:
        return self._color

    @property
    def opacity(self) -> float:
        return self._opacity

    def snapshot(self) -> tuple[str, float, float]:
        """Current (color, opacity, hue), in on_change argument order."""
        return self._color, self._opacity, self._hue

    def set_hue(self, hue: float) -> None:
        if hue != self._hue:
            self._hue = hue
            self._notify(HUE)

    def set_color(self, color: str) -> None:
        if color != self._color:
            self._color = color
            self._notify(COLOR)

    def set_opacity(self, opacity: float) -> None:
        if opacity != self._opacity:
            self._opacity = opacity
            self._notify(OPACITY)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register an observer called as observer(state, field) on each change.

        Returns:
            Function that unregisters the observer.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self, field: str) -> None:
        # Changes made by observers fold into the outermost notification
        self._depth += 1
        try:
            for observer in list(self._observers):
                observer(self, field)
        finally:
            self._depth -= 1
        if self._depth == 0 and self._on_change is not None:
            self._on_change(*self.snapshot())
