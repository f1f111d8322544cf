# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Color string parsing and re-serialization.

This is the public color API: parse any CSS color string once into a
ColorValue snapshot, then derive other representations from it.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Union

from huepick.schema import HSL, HSV, RGB, ColorValue
from huepick.color.colorspace import (
    format_number,
    hex_to_string,
    hsl_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_string,
    round_half_up,
)
from huepick.color.css import resolve

Resolver = Callable[[str], RGB]


class ColorSpace(Enum):
    """Target spaces for convert()."""

    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    CMYK = "cmyk"
    HEX = "hex"


def _round_hue(h: float) -> int:
    """Round a hue to whole degrees, wrapping 360 back to 0."""
    return round_half_up(h) % 360


def parse_color(value: str, *, resolver: Resolver = resolve) -> ColorValue:
    """
    Parse a color string into a ColorValue.

    Args:
        value: Any color string the resolver accepts (hex, rgb, rgba,
            hsl, hsla, named)
        resolver: String-to-RGB oracle. Defaults to the built-in CSS resolver;
            hosts with a native color parser can pass their own.

    Returns:
        ColorValue with hex, rgb (with alpha), and rounded hsl / hsv

    Raises:
        UnparsableColor: If the resolver cannot resolve the string.

    Example:
        >>> parse_color("#ff0000").hsl
        HSL(h=0, s=100, l=50)
    """
    rgb = resolver(value)
    r, g, b = rgb.r, rgb.g, rgb.b

    hsl = rgb_to_hsl(r, g, b)
    hsv = rgb_to_hsv(r, g, b)

    return ColorValue(
        hex=hex_to_string(rgb_to_hex(r, g, b)),
        rgb=RGB(r, g, b, rgb.a),
        hsl=HSL(
            h=_round_hue(hsl.h),
            s=round_half_up(hsl.s),
            l=round_half_up(hsl.l),
        ),
        hsv=HSV(
            h=_round_hue(hsv.h),
            s=round_half_up(hsv.s),
            v=round_half_up(hsv.v),
        ),
    )


def change_opacity(color: str, opacity: float) -> str:
    """Return ``color`` as an rgba() string with its alpha replaced."""
    rgb = parse_color(color).rgb
    return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {format_number(opacity)})"


def change_hue(color: str, hue: float) -> str:
    """
    Change the hue of a color, keeping saturation and lightness.

    The result is an opaque rgb() string: any alpha on ``color`` is dropped.
    Opacity is owned separately by the caller (see OpacityController).
    """
    hsl = parse_color(color).hsl
    return rgb_to_string(hsl_to_rgb(hue, hsl.s, hsl.l))


def convert(
    value: str,
    to: Union[ColorSpace, str],
    opacity: float = 1,
) -> str:
    """
    Re-serialize a color string in another color space.

    Args:
        value: Color string to convert
        to: Target space (ColorSpace member or "rgb", "hsl", "hsv", "cmyk", "hex")
        opacity: Alpha to append. rgb and hsl switch to rgba()/hsla() when
            it is not 1; hex, hsv and cmyk ignore it.

    Returns:
        The color in the target notation, e.g. "hsl(0, 100%, 50%)"

    Raises:
        UnparsableColor: If ``value`` cannot be resolved.
        ValueError: If ``to`` is not a known color space.
    """
    space = ColorSpace(to)
    parsed = parse_color(value)
    rgb, hsl, hsv = parsed.rgb, parsed.hsl, parsed.hsv

    if space is ColorSpace.RGB:
        if opacity != 1:
            return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {format_number(opacity)})"
        return f"rgb({rgb.r}, {rgb.g}, {rgb.b})"

    if space is ColorSpace.HSL:
        if opacity != 1:
            return f"hsla({hsl.h}, {hsl.s}%, {hsl.l}%, {format_number(opacity)})"
        return f"hsl({hsl.h}, {hsl.s}%, {hsl.l}%)"

    if space is ColorSpace.HEX:
        # Hex has no alpha channel
        return parsed.hex

    if space is ColorSpace.HSV:
        return f"hsv({hsv.h}, {hsv.s}%, {hsv.v}%)"

    cmyk = rgb_to_cmyk(rgb.r, rgb.g, rgb.b)
    return (
        f"cmyk({round_half_up(cmyk.c * 100)}%, {round_half_up(cmyk.m * 100)}%, "
        f"{round_half_up(cmyk.y * 100)}%, {round_half_up(cmyk.k * 100)}%)"
    )
