# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Huepick -- Color model and pointer-driven color picking.

Converts between hex, RGB, HSL, HSV and CMYK, paints saturation/value
planes and hue strips into raster surfaces, and maps pointer positions to
colors and back.

Quick start::

    from huepick import parse_color, convert

    parse_color("tomato").hex          # "#FF6347"
    convert("#ff0000", "hsl")          # "hsl(0, 100%, 50%)"

    from huepick import Surface, paint_plane, color_to_position

    plane = Surface(256, 256)
    paint_plane(plane, 120)
    color_to_position(plane, "rgb(0, 255, 0)")   # Position(x=255, y=0)
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from huepick.errors import InvalidFormat, UnparsableColor
from huepick.schema import CMYK, HSL, HSV, RGB, ColorValue, Hex, Position
from huepick.color import (
    ColorSpace,
    change_hue,
    change_opacity,
    cmyk_to_string,
    convert,
    hex_to_string,
    hsl_to_rgb,
    hsl_to_string,
    hsv_to_string,
    parse_color,
    resolve,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_string,
)
from huepick.surface import (
    Surface,
    color_to_position,
    hue_to_position,
    paint_plane,
    paint_strip,
    position_to_color,
    position_to_hue,
)
from huepick.runtime import (
    DragSession,
    PickerConfig,
    PickerState,
    setup_dragging,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "parse_color",
    "change_opacity",
    "change_hue",
    "convert",
    "resolve",
    "ColorSpace",
    # Conversions and formatters
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_hex",
    "rgb_to_cmyk",
    "hsl_to_rgb",
    "rgb_to_string",
    "hsl_to_string",
    "hsv_to_string",
    "cmyk_to_string",
    "hex_to_string",
    # Types (commonly needed)
    "RGB",
    "HSL",
    "HSV",
    "CMYK",
    "Hex",
    "ColorValue",
    "Position",
    # Errors
    "InvalidFormat",
    "UnparsableColor",
    # Sampling
    "Surface",
    "paint_plane",
    "paint_strip",
    "position_to_hue",
    "hue_to_position",
    "position_to_color",
    "color_to_position",
    # Interaction
    "DragSession",
    "setup_dragging",
    "PickerState",
    "PickerConfig",
    # Version
    "__version__",
]
