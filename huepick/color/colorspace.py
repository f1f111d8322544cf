# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion hub: RGB (0-255) ↔ HSL / HSV / CMYK / Hex

Every space is derived from an RGB triple; the only inverse paths back to
RGB are HSL, HSV, CMYK and Hex. Conversions keep full floating point
precision. Rounding happens only where a value has to become an 8-bit
channel (half-up, matching how CSS engines round).

All functions are pure; none of them raise except hex parsing.
"""

from __future__ import annotations

import math
from typing import Union

from huepick.schema import CMYK, HSL, HSV, RGB, Hex


# =============================================================================
# Numeric helpers
# =============================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def format_number(value: Union[int, float]) -> str:
    """
    Format a number for a CSS-style string.

    Integral values print without a fractional part ("50", not "50.0");
    everything else prints in shortest round-trip form. The same number
    always yields the same string.
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _channel(value: float) -> int:
    """Convert a 0-1 fraction to a clamped 0-255 channel."""
    return int(clamp(round_half_up(value * 255), 0, 255))


# =============================================================================
# RGB → other spaces
# =============================================================================


def _hue(r: float, g: float, b: float, mx: float, delta: float) -> float:
    """Hue in degrees [0, 360) from normalized channels. delta must be > 0."""
    if mx == r:
        h = (g - b) / delta + (6.0 if g < b else 0.0)
    elif mx == g:
        h = (b - r) / delta + 2.0
    else:
        h = (r - g) / delta + 4.0
    return h * 60.0


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """
    Convert RGB channels (0-255) to HSL.

    Returns:
        HSL with h in degrees [0, 360) and s, l in percent [0, 100].
        Achromatic colors have h = 0 and s = 0.
    """
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    mx, mn = max(r, g, b), min(r, g, b)
    lightness = (mx + mn) / 2.0

    if mx == mn:
        return HSL(h=0.0, s=0.0, l=lightness * 100.0)

    delta = mx - mn
    if lightness > 0.5:
        saturation = delta / (2.0 - mx - mn)
    else:
        saturation = delta / (mx + mn)

    return HSL(
        h=_hue(r, g, b, mx, delta),
        s=saturation * 100.0,
        l=lightness * 100.0,
    )


def rgb_to_hsv(r: int, g: int, b: int) -> HSV:
    """
    Convert RGB channels (0-255) to HSV.

    Returns:
        HSV with h in degrees [0, 360) and s, v in percent [0, 100].
    """
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    mx, mn = max(r, g, b), min(r, g, b)
    delta = mx - mn

    saturation = 0.0 if mx == 0 else delta / mx
    hue = 0.0 if delta == 0 else _hue(r, g, b, mx, delta)

    return HSV(h=hue, s=saturation * 100.0, v=mx * 100.0)


def rgb_to_hex(r: int, g: int, b: int) -> Hex:
    """Convert RGB channels to a Hex value with uppercase digits."""
    r, g, b = (int(clamp(round_half_up(c), 0, 255)) for c in (r, g, b))
    return Hex(f"{r:02X}{g:02X}{b:02X}")


def rgb_to_cmyk(r: int, g: int, b: int) -> CMYK:
    """
    Convert RGB channels to CMYK fractions.

    Pure black has no defined ink ratio; it maps to k = 1 with c = m = y = 0.
    """
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    k = 1.0 - max(r, g, b)

    if k == 1.0:
        return CMYK(c=0.0, m=0.0, y=0.0, k=1.0)

    return CMYK(
        c=(1.0 - r - k) / (1.0 - k),
        m=(1.0 - g - k) / (1.0 - k),
        y=(1.0 - b - k) / (1.0 - k),
        k=k,
    )


# =============================================================================
# Other spaces → RGB
# =============================================================================


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1.0
    if t > 1:
        t -= 1.0
    if t < 1 / 6:
        return p + (q - p) * 6.0 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees (any real; normalized modulo 360)
        s: Saturation in percent [0, 100]
        l: Lightness in percent [0, 100]

    Returns:
        Opaque RGB with channels rounded half-up.
    """
    hue = (h % 360.0) / 360.0
    s = clamp(s, 0.0, 100.0) / 100.0
    l = clamp(l, 0.0, 100.0) / 100.0  # noqa: E741

    if s == 0:
        channel = _channel(l)
        return RGB(channel, channel, channel)

    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q

    return RGB(
        r=_channel(_hue_to_channel(p, q, hue + 1 / 3)),
        g=_channel(_hue_to_channel(p, q, hue)),
        b=_channel(_hue_to_channel(p, q, hue - 1 / 3)),
    )


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV (degrees, percent, percent) to opaque RGB."""
    s = clamp(s, 0.0, 100.0) / 100.0
    v = clamp(v, 0.0, 100.0) / 100.0
    sector = (h % 360.0) / 60.0
    chroma = v * s
    x = chroma * (1.0 - abs(sector % 2.0 - 1.0))
    m = v - chroma

    r, g, b = [
        (chroma, x, 0.0),
        (x, chroma, 0.0),
        (0.0, chroma, x),
        (0.0, x, chroma),
        (x, 0.0, chroma),
        (chroma, 0.0, x),
    ][int(sector) % 6]

    return RGB(_channel(r + m), _channel(g + m), _channel(b + m))


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> RGB:
    """Convert CMYK fractions to opaque RGB."""
    return RGB(
        r=_channel((1.0 - c) * (1.0 - k)),
        g=_channel((1.0 - m) * (1.0 - k)),
        b=_channel((1.0 - y) * (1.0 - k)),
    )


def hex_to_rgb(hex_color: Union[str, Hex]) -> RGB:
    """
    Convert a hex color to opaque RGB.

    Raises:
        InvalidFormat: If a string argument is not six hex digits.
    """
    digits = hex_color.value if isinstance(hex_color, Hex) else Hex(hex_color).value
    return RGB(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


# =============================================================================
# Formatters
# =============================================================================


def hsl_to_string(hsl: HSL) -> str:
    """Format HSL as a CSS string, e.g. "hsl(0, 100%, 50%)"."""
    return (
        f"hsl({format_number(hsl.h)}, {format_number(hsl.s)}%, "
        f"{format_number(hsl.l)}%)"
    )


def rgb_to_string(rgb: RGB) -> str:
    """Format RGB as a CSS string, e.g. "rgb(255, 0, 0)". Alpha is ignored."""
    return f"rgb({format_number(rgb.r)}, {format_number(rgb.g)}, {format_number(rgb.b)})"


def rgba_to_string(rgb: RGB, alpha: float | None = None) -> str:
    """Format RGB with alpha, e.g. "rgba(255, 0, 0, 0.5)".

    Uses ``rgb.a`` unless an explicit alpha is given.
    """
    a = rgb.a if alpha is None else alpha
    return (
        f"rgba({format_number(rgb.r)}, {format_number(rgb.g)}, "
        f"{format_number(rgb.b)}, {format_number(a)})"
    )


def hsv_to_string(hsv: HSV) -> str:
    """Format HSV, e.g. "hsv(0, 100%, 100%)"."""
    return (
        f"hsv({format_number(hsv.h)}, {format_number(hsv.s)}%, "
        f"{format_number(hsv.v)}%)"
    )


def cmyk_to_string(cmyk: CMYK) -> str:
    """Format CMYK fractions as percentages, e.g. "cmyk(0%, 100%, 100%, 0%)"."""
    return (
        f"cmyk({format_number(cmyk.c * 100)}%, {format_number(cmyk.m * 100)}%, "
        f"{format_number(cmyk.y * 100)}%, {format_number(cmyk.k * 100)}%)"
    )


def hex_to_string(hex_color: Union[str, Hex]) -> str:
    """
    Format a hex color with a leading "#".

    Raises:
        InvalidFormat: If a string argument is not six hex digits.
    """
    value = hex_color if isinstance(hex_color, Hex) else Hex(hex_color)
    return f"#{value.value}"
