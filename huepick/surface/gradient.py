# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Gradient painting and position ↔ color lookups.

Two surface kinds:
1. Plane: saturation × value for one fixed hue. A white → black vertical
   gradient is multiplied by a transparent → hue horizontal gradient.
   Repainted whenever the hue changes.
2. Strip: every hue from 0° to 360°, stops every 10°. Painted once.

Lookups read pixels back from the painted surface. The reverse lookup
(color → position) scans the whole buffer; it is meant for placing a marker
for an externally set color, not for per-frame use.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import numpy as np

from huepick.schema import Position
from huepick.color.colorspace import clamp, format_number
from huepick.surface.raster import Surface

logger = logging.getLogger(__name__)

# Luma weights: bias matches toward perceived brightness
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

# Hue strip stop spacing in degrees (37 stops: 0, 10, ..., 360)
HUE_STOP_STEP = 10

_TARGET_RE = re.compile(r"rgba?\((\d+),\s*(\d+),\s*(\d+)(?:,\s*([\d.]+))?\)")


# =============================================================================
# Painting
# =============================================================================


def paint_plane(surface: Surface, hue: float) -> None:
    """
    Paint the saturation/value plane for a hue.

    Rows run from white (top) to black (bottom); columns run from no tint
    (left) to the fully saturated hue (right), combined with multiply.
    Only the top-right corner holds the pure hue and only the top-left
    corner pure white.
    """
    width, height = surface.width, surface.height
    tint = format_number(hue)

    value = surface.create_linear_gradient(1, 1, 1, height - 1)
    value.add_color_stop(0, "white")
    value.add_color_stop(1, "black")

    saturation = surface.create_linear_gradient(1, 0, width - 1, 0)
    saturation.add_color_stop(0, f"hsla({tint},100%,50%,0)")
    saturation.add_color_stop(1, f"hsla({tint},100%,50%,1)")

    surface.clear()
    surface.composite_operation = "source-over"
    surface.fill_rect(0, 0, width, height, value)

    surface.composite_operation = "multiply"
    surface.fill_rect(0, 0, width, height, saturation)
    surface.composite_operation = "source-over"

    surface.hue = hue
    logger.debug("Painted %dx%d plane for hue %s", width, height, tint)


def paint_strip(surface: Surface) -> None:
    """Paint the hue strip: fully saturated hues from 0° (left) to 360° (right)."""
    gradient = surface.create_linear_gradient(0, 0, surface.width, 0)

    n_stops = 360 // HUE_STOP_STEP
    for i in range(n_stops + 1):
        gradient.add_color_stop(i / n_stops, f"hsla({i * HUE_STOP_STEP}, 100%, 50%, 1)")

    surface.clear()
    surface.composite_operation = "source-over"
    surface.fill_rect(0, 0, surface.width, surface.height, gradient)

    surface.hue = None
    logger.debug("Painted %dx%d hue strip", surface.width, surface.height)


# =============================================================================
# Strip lookups
# =============================================================================


def position_to_hue(width: float, x: float) -> Optional[float]:
    """
    Hue at horizontal position x on a strip of the given width.

    Returns:
        Hue in degrees, clamped to [0, 360], or None if width is not positive.
    """
    if width <= 0:
        return None
    return clamp(x * 360.0 / width, 0.0, 360.0)


def hue_to_position(width: float, hue: Optional[float]) -> Optional[float]:
    """
    Horizontal position of a hue on a strip of the given width.

    Inverse of position_to_hue. Not clamped; callers clamp if needed.
    Returns None if hue is None.
    """
    if hue is None:
        return None
    return width * hue / 360.0


def hue_coordinates(width: float, height: float, hue: Optional[float]) -> Position:
    """Marker centre for a hue on the strip: (hue position, vertical middle)."""
    if hue is None:
        return Position(0, 0)
    return Position(width * hue / 360.0, height / 2)


# =============================================================================
# Plane lookups
# =============================================================================


def position_to_color(surface: Surface, x: float, y: float) -> Optional[str]:
    """
    Read the color at (x, y) as an "rgb(r, g, b)" string.

    Returns None if the surface has not been painted yet.
    """
    pixel = surface.get_pixel(x, y)
    if pixel is None:
        return None
    r, g, b, _ = pixel
    return f"rgb({r}, {g}, {b})"


def color_to_position(
    surface: Surface,
    target: str,
    *,
    weights: tuple[float, float, float] = LUMA_WEIGHTS,
) -> Optional[Position]:
    """
    Find the pixel closest to a target color.

    Distance is luma-weighted Euclidean:
        sqrt((0.299·Δr)² + (0.587·Δg)² + (0.114·Δb)²)

    Every pixel is compared (O(width·height)). Ties go to the first pixel in
    row-major order (smallest y, then smallest x).

    Args:
        surface: Painted surface to search
        target: Color as "rgb(r, g, b)" or "rgba(r, g, b, a)"; alpha is ignored
        weights: Per-channel weights for the distance

    Returns:
        Position of the best match, or None if the surface is not painted
        or the target is not an rgb()/rgba() string.
    """
    if not target:
        return None

    pixels = surface.pixels
    if pixels is None:
        return None

    m = _TARGET_RE.match(target.strip())
    if not m:
        logger.debug("Cannot locate %r: not an rgb()/rgba() string", target)
        return None

    target_rgb = np.array([int(m.group(i)) for i in (1, 2, 3)], dtype=np.float64)
    delta = (pixels[..., :3].astype(np.float64) - target_rgb) * np.asarray(
        weights, dtype=np.float64
    )
    distance = np.sqrt(np.sum(delta ** 2, axis=-1))

    # argmin returns the first minimum of the flattened (row-major) array
    y, x = divmod(int(np.argmin(distance)), surface.width)
    return Position(x, y)
