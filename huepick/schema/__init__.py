# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

All types in this module are immutable (frozen dataclasses).
A parse produces a fresh snapshot; nothing is cached or mutated.
"""

from huepick.schema.color_value import (
    CMYK,
    HSL,
    HSV,
    RGB,
    ColorValue,
    Hex,
    Position,
)

__all__ = [
    # Color space types
    "RGB",
    "HSL",
    "HSV",
    "CMYK",
    "Hex",
    # Aggregate
    "ColorValue",
    # Geometry
    "Position",
]
