# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Color value types.

Design principles:
- Immutable: All types are frozen dataclasses
- Plain data: Formatting lives in free functions (huepick.color.colorspace),
  not in __str__ overrides
- RGB is canonical: every other space is derived from an RGB triple

Ranges:
- RGB: r, g, b integers 0-255, a (alpha) 0.0-1.0
- HSL / HSV: h in degrees [0, 360), s / l / v in percent [0, 100]
- CMYK: c, m, y, k as fractions [0, 1]
- Hex: exactly six hex digits, no alpha
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Optional, Union

from huepick.errors import InvalidFormat


_HEX_RE = re.compile(r"[0-9A-Fa-f]{6}")

Number = Union[int, float]


# =============================================================================
# Color Space Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """
    An sRGB color with alpha.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        a: Alpha (0.0 = transparent, 1.0 = opaque)
    """
    r: int
    g: int
    b: int
    a: float = 1.0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict) -> RGB:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"], a=data.get("a", 1.0))


@dataclass(frozen=True, slots=True)
class HSL:
    """Hue (degrees), saturation and lightness (percent)."""
    h: Number
    s: Number
    l: Number  # noqa: E741

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSL:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


@dataclass(frozen=True, slots=True)
class HSV:
    """Hue (degrees), saturation and value (percent)."""
    h: Number
    s: Number
    v: Number

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "v": self.v}

    @classmethod
    def from_dict(cls, data: dict) -> HSV:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], v=data["v"])


@dataclass(frozen=True, slots=True)
class CMYK:
    """Cyan, magenta, yellow and key (black) as fractions 0-1."""
    c: float
    m: float
    y: float
    k: float

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k}


@dataclass(frozen=True, slots=True)
class Hex:
    """
    A six-digit hex color without alpha.

    A single leading ``#`` is stripped on construction; the digits keep
    their original case.

    Raises:
        InvalidFormat: If the value is not exactly six hex digits.
    """
    value: str

    def __post_init__(self) -> None:
        """Normalize and validate the digits."""
        if not isinstance(self.value, str):
            raise InvalidFormat(f"Invalid hex color value: {self.value!r}")
        digits = self.value[1:] if self.value.startswith("#") else self.value
        if not _HEX_RE.fullmatch(digits):
            raise InvalidFormat(f"Invalid hex color value: {self.value!r}")
        object.__setattr__(self, "value", digits)


# =============================================================================
# Aggregate
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorValue:
    """
    Snapshot of one parsed color in every public representation.

    All four fields describe the same underlying RGB + alpha. HSL and HSV
    are rounded to whole degrees and percents here; conversions inside
    huepick.color keep full precision.

    Attributes:
        hex: Hex string like "#3941C8" (alpha is not represented)
        rgb: Canonical RGB with alpha
        hsl: Rounded HSL
        hsv: Rounded HSV
    """
    hex: str
    rgb: RGB
    hsl: HSL
    hsv: HSV

    @property
    def alpha(self) -> float:
        """Opacity of the color (convenience accessor)."""
        return self.rgb.a

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "hsl": self.hsl.to_dict(),
            "hsv": self.hsv.to_dict(),
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> ColorValue:
        """Deserialize from dictionary."""
        return cls(
            hex=data["hex"],
            rgb=RGB.from_dict(data["rgb"]),
            hsl=HSL.from_dict(data["hsl"]),
            hsv=HSV.from_dict(data["hsv"]),
        )

    @classmethod
    def from_json(cls, json_str: str) -> ColorValue:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


# =============================================================================
# Geometry
# =============================================================================


@dataclass(frozen=True, slots=True)
class Position:
    """A point on a surface or element, in pixels from the top-left corner."""
    x: Number
    y: Number
