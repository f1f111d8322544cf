# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
CSS color-string resolution.

Resolves a CSS color string to a concrete RGB + alpha, the same answer a
browser gives for the computed value of ``color``. Parsing is delegated to
ColorAide, which follows the CSS Color syntax:

- Hex: #rgb, #rgba, #rrggbb, #rrggbbaa
- rgb() / rgba(): legacy comma syntax or space syntax with "/ alpha",
  channels as numbers (0-255) or percentages
- hsl() / hsla(): same two syntaxes, hue in deg (default), rad, grad or turn
- Named colors and ``transparent``
- Any other CSS color function ColorAide understands (hwb, lab, lch, color())

Matching is case-insensitive. The result is clipped to the sRGB gamut,
channels are rounded half-up to 0-255, and alpha is clamped to [0, 1].
"""

from __future__ import annotations

import logging

from coloraide import Color

from huepick.errors import UnparsableColor
from huepick.schema import RGB
from huepick.color.colorspace import clamp, round_half_up

logger = logging.getLogger(__name__)

# Decimal places kept before rounding to 8 bits; drops float noise from
# the 0-1 round trip so exact halves still round up
_CHANNEL_PRECISION = 6


def resolve(value: str) -> RGB:
    """
    Resolve a CSS color string to RGB with alpha.

    Args:
        value: Any CSS color string, e.g. "#ff0000", "rgba(0, 0, 0, .5)",
            "hsl(120deg 100% 50% / 25%)", "rebeccapurple"

    Returns:
        RGB with integer channels and float alpha

    Raises:
        UnparsableColor: If ColorAide cannot parse the string.
    """
    if not isinstance(value, str):
        raise UnparsableColor(value)

    try:
        color = Color(value.strip().lower())
    except ValueError as e:
        logger.debug("Rejected color %r: %s", value, e)
        raise UnparsableColor(value) from e

    srgb = color.convert("srgb")
    alpha = srgb.alpha()
    if alpha != alpha:  # NaN for "none"
        alpha = 0.0

    return RGB(
        r=_channel(srgb["red"]),
        g=_channel(srgb["green"]),
        b=_channel(srgb["blue"]),
        a=float(clamp(alpha, 0.0, 1.0)),
    )


def _channel(value: float) -> int:
    """sRGB fraction → clipped 0-255 channel, rounded half-up."""
    if value != value:  # NaN for "none"
        value = 0.0
    scaled = round(value * 255.0, _CHANNEL_PRECISION)
    return int(clamp(round_half_up(scaled), 0, 255))
