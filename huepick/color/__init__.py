# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Color model and parsing for Huepick.

Pure conversions between RGB, HSL, HSV, CMYK and Hex, a CSS color-string
resolver, and the parse / convert API built on top of them.
"""

from huepick.color.colorspace import (
    cmyk_to_rgb,
    cmyk_to_string,
    format_number,
    hex_to_rgb,
    hex_to_string,
    hsl_to_rgb,
    hsl_to_string,
    hsv_to_rgb,
    hsv_to_string,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_string,
    rgba_to_string,
)
from huepick.color.css import resolve
from huepick.color.parse import (
    ColorSpace,
    change_hue,
    change_opacity,
    convert,
    parse_color,
)

__all__ = [
    # Parsing
    "parse_color",
    "resolve",
    "change_opacity",
    "change_hue",
    "convert",
    "ColorSpace",
    # Conversions
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_hex",
    "rgb_to_cmyk",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "cmyk_to_rgb",
    "hex_to_rgb",
    # Formatters
    "format_number",
    "rgb_to_string",
    "rgba_to_string",
    "hsl_to_string",
    "hsv_to_string",
    "cmyk_to_string",
    "hex_to_string",
]
