# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Gradient sampling for Huepick.

A raster Surface with canvas-style drawing primitives, painters for the
saturation/value plane and the hue strip, and the lookups that map between
positions and colors.
"""

from huepick.surface.raster import COMPOSITE_OPERATIONS, LinearGradient, Surface
from huepick.surface.gradient import (
    HUE_STOP_STEP,
    LUMA_WEIGHTS,
    color_to_position,
    hue_coordinates,
    hue_to_position,
    paint_plane,
    paint_strip,
    position_to_color,
    position_to_hue,
)

__all__ = [
    # Raster
    "Surface",
    "LinearGradient",
    "COMPOSITE_OPERATIONS",
    # Painting
    "paint_plane",
    "paint_strip",
    # Lookups
    "position_to_hue",
    "hue_to_position",
    "hue_coordinates",
    "position_to_color",
    "color_to_position",
    # Constants
    "LUMA_WEIGHTS",
    "HUE_STOP_STEP",
]
