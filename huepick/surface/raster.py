# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Raster surface with 2-D drawing primitives.

A Surface is an addressable RGBA pixel buffer plus the three operations the
gradient sampler needs:

- fill_rect with a solid color or a linear gradient with ordered color stops
- a compositing mode (source-over or multiply)
- pixel readback

Semantics follow the HTML canvas 2-D context:
- Gradients are sampled at pixel centres and clamp to their end stops
- Stop colors are interpolated in premultiplied RGBA
- A zero-length gradient paints nothing
- Compositing uses the W3C Compositing formulas on premultiplied values
- The stored buffer is straight (non-premultiplied) uint8 RGBA

All array math is NumPy.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from huepick.schema import RGB
from huepick.color.css import resolve


COMPOSITE_OPERATIONS = ("source-over", "multiply")


def _premultiply(rgb: RGB) -> NDArray[np.float64]:
    """RGB (0-255, alpha 0-1) → premultiplied RGBA in [0, 1]."""
    a = float(rgb.a)
    return np.array(
        [rgb.r / 255.0 * a, rgb.g / 255.0 * a, rgb.b / 255.0 * a, a],
        dtype=np.float64,
    )


def _to_uint8(values: NDArray[np.float64]) -> NDArray[np.uint8]:
    """Fractions [0, 1] → uint8, rounding half-up."""
    return np.clip(np.floor(values * 255.0 + 0.5), 0, 255).astype(np.uint8)


# =============================================================================
# Linear Gradient
# =============================================================================


class LinearGradient:
    """
    A linear gradient between two points with ordered color stops.

    Stops with equal offsets keep insertion order; at the shared offset the
    later stop wins.
    """

    def __init__(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self.start = (float(x0), float(y0))
        self.end = (float(x1), float(y1))
        self._stops: list[tuple[float, RGB]] = []

    @property
    def stops(self) -> tuple[tuple[float, RGB], ...]:
        """Color stops ordered by offset."""
        return tuple(sorted(self._stops, key=lambda stop: stop[0]))

    @property
    def is_degenerate(self) -> bool:
        """True if start and end coincide (nothing is painted)."""
        return self.start == self.end

    def add_color_stop(self, offset: float, color: str) -> None:
        """
        Add a color stop.

        Args:
            offset: Position along the gradient axis (0.0-1.0)
            color: CSS color string

        Raises:
            ValueError: If offset is outside [0, 1].
            UnparsableColor: If color cannot be resolved.
        """
        if not 0.0 <= offset <= 1.0:
            raise ValueError(f"Offset must be 0-1, got {offset}")
        self._stops.append((float(offset), resolve(color)))

    def sample(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """
        Evaluate the gradient at the given points.

        Args:
            xs, ys: Arrays of identical shape with point coordinates

        Returns:
            Array of shape (*xs.shape, 4) with premultiplied RGBA in [0, 1].
            Transparent black when the gradient has no stops.
        """
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        stops = self.stops

        if not stops:
            return np.zeros(xs.shape + (4,), dtype=np.float64)

        (x0, y0), (x1, y1) = self.start, self.end
        dx, dy = x1 - x0, y1 - y0
        t = ((xs - x0) * dx + (ys - y0) * dy) / (dx * dx + dy * dy)
        t = np.clip(t, 0.0, 1.0)

        offsets = np.array([offset for offset, _ in stops], dtype=np.float64)
        colors = np.stack([_premultiply(rgb) for _, rgb in stops])

        # Number of stops at or before t; 0 → before first, n → after last
        idx = np.searchsorted(offsets, t, side="right")
        hi = np.clip(idx, 0, len(stops) - 1)
        lo = np.clip(idx - 1, 0, len(stops) - 1)

        span = offsets[hi] - offsets[lo]
        frac = np.where(span > 0, (t - offsets[lo]) / np.where(span > 0, span, 1.0), 0.0)
        frac = frac[..., np.newaxis]

        return colors[lo] * (1.0 - frac) + colors[hi] * frac


# =============================================================================
# Surface
# =============================================================================


class Surface:
    """
    A rectangular RGBA pixel buffer.

    The buffer is allocated by the first drawing operation. Until then the
    surface is not ready and readbacks return None. A surface with zero
    width or height never gets a buffer.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        hue: Generation tag, the hue the surface was last painted for
            (None for hue-invariant content or an unpainted surface)
    """

    def __init__(self, width: int, height: int) -> None:
        self.width, self.height = _validate_size(width, height)
        self.hue: Optional[float] = None
        self._composite_operation = "source-over"
        self._pixels: Optional[NDArray[np.uint8]] = None

    def __repr__(self) -> str:
        return (
            f"Surface(width={self.width}, height={self.height}, "
            f"hue={self.hue}, ready={self.is_ready})"
        )

    # -- state ---------------------------------------------------------------

    @property
    def composite_operation(self) -> str:
        """Compositing mode for subsequent fills."""
        return self._composite_operation

    @composite_operation.setter
    def composite_operation(self, operation: str) -> None:
        if operation not in COMPOSITE_OPERATIONS:
            raise ValueError(
                f"Composite operation must be one of {COMPOSITE_OPERATIONS}, "
                f"got {operation!r}"
            )
        self._composite_operation = operation

    @property
    def is_ready(self) -> bool:
        """True once a backing buffer exists."""
        return self._pixels is not None

    @property
    def pixels(self) -> Optional[NDArray[np.uint8]]:
        """Read-only (H, W, 4) view of the buffer, or None if not ready."""
        if self._pixels is None:
            return None
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    def resize(self, width: int, height: int) -> None:
        """Resize the surface. Drops the buffer and the hue tag."""
        self.width, self.height = _validate_size(width, height)
        self._pixels = None
        self.hue = None

    def clear(self) -> None:
        """Reset every allocated pixel to transparent black."""
        if self._pixels is not None:
            self._pixels[...] = 0

    def _buffer(self) -> Optional[NDArray[np.uint8]]:
        if self._pixels is None and self.width > 0 and self.height > 0:
            self._pixels = np.zeros((self.height, self.width, 4), dtype=np.uint8)
        return self._pixels

    # -- drawing -------------------------------------------------------------

    def create_linear_gradient(
        self, x0: float, y0: float, x1: float, y1: float
    ) -> LinearGradient:
        """Create a linear gradient from (x0, y0) to (x1, y1)."""
        return LinearGradient(x0, y0, x1, y1)

    def fill_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        style: Union[str, LinearGradient],
    ) -> None:
        """
        Fill a rectangle with a CSS color or a linear gradient.

        The rectangle is clipped to the surface. The current composite
        operation decides how the fill combines with existing pixels.
        """
        buffer = self._buffer()
        if buffer is None:
            return

        if isinstance(style, LinearGradient) and style.is_degenerate:
            return

        if width < 0:
            x, width = x + width, -width
        if height < 0:
            y, height = y + height, -height

        col0 = max(0, math.floor(x))
        col1 = min(self.width, math.ceil(x + width))
        row0 = max(0, math.floor(y))
        row1 = min(self.height, math.ceil(y + height))
        if col0 >= col1 or row0 >= row1:
            return

        if isinstance(style, LinearGradient):
            ys, xs = np.mgrid[row0:row1, col0:col1].astype(np.float64)
            source = style.sample(xs + 0.5, ys + 0.5)
        else:
            color = _premultiply(resolve(style))
            source = np.broadcast_to(color, (row1 - row0, col1 - col0, 4))

        region = buffer[row0:row1, col0:col1]
        region[...] = self._composite(source, region)

    def _composite(
        self,
        source: NDArray[np.float64],
        backdrop: NDArray[np.uint8],
    ) -> NDArray[np.uint8]:
        """Composite premultiplied source over a straight uint8 backdrop."""
        alpha_b = backdrop[..., 3:4].astype(np.float64) / 255.0
        cb = backdrop[..., :3].astype(np.float64) / 255.0 * alpha_b
        alpha_s = source[..., 3:4]
        cs = source[..., :3]

        if self._composite_operation == "multiply":
            co = cs * (1.0 - alpha_b) + cb * (1.0 - alpha_s) + cs * cb
        else:
            co = cs + cb * (1.0 - alpha_s)
        alpha_o = alpha_s + alpha_b * (1.0 - alpha_s)

        straight = np.divide(
            co, alpha_o, out=np.zeros_like(co), where=alpha_o > 0
        )
        return np.concatenate([_to_uint8(straight), _to_uint8(alpha_o)], axis=-1)

    # -- readback ------------------------------------------------------------

    def get_pixel(self, x: float, y: float) -> Optional[tuple[int, int, int, int]]:
        """
        Read one pixel as (r, g, b, a) with a in 0-255.

        Coordinates are floored to the containing pixel. Returns None if the
        surface has no buffer yet. Coordinates outside the surface read as
        transparent black.
        """
        if self._pixels is None:
            return None
        col, row = math.floor(x), math.floor(y)
        if not (0 <= col < self.width and 0 <= row < self.height):
            return (0, 0, 0, 0)
        r, g, b, a = (int(v) for v in self._pixels[row, col])
        return (r, g, b, a)

    def get_image_data(self) -> Optional[NDArray[np.uint8]]:
        """Copy of the full (H, W, 4) buffer, or None if not ready."""
        if self._pixels is None:
            return None
        return self._pixels.copy()

    def put_image_data(self, data: NDArray[np.uint8]) -> None:
        """
        Replace the buffer with an (H, W, 3) or (H, W, 4) uint8 array.

        The surface takes the array's dimensions. RGB input is made opaque.
        """
        data = np.asarray(data)
        if data.ndim != 3 or data.shape[2] not in (3, 4):
            raise ValueError(f"Expected (H, W, 3) or (H, W, 4) array, got shape {data.shape}")
        if data.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {data.dtype}")

        height, width = data.shape[:2]
        if data.shape[2] == 3:
            alpha = np.full((height, width, 1), 255, dtype=np.uint8)
            data = np.concatenate([data, alpha], axis=-1)

        self.width, self.height = _validate_size(width, height)
        self._pixels = data.copy() if width and height else None

    # -- image I/O (Pillow) --------------------------------------------------

    def to_image(self) -> "PIL.Image.Image":
        """
        Convert the buffer to a Pillow RGBA image.

        Raises:
            ImportError: If Pillow is not installed.
            ValueError: If the surface has not been painted.
        """
        Image = _import_pil()
        if self._pixels is None:
            raise ValueError("Surface has no pixels to export; paint it first")
        return Image.fromarray(self._pixels.copy())

    def save(self, path: Union[str, Path]) -> None:
        """Write the surface to an image file (format from the extension)."""
        self.to_image().save(path)

    @classmethod
    def from_image(cls, image: Union[str, Path, NDArray[np.uint8]]) -> Surface:
        """
        Build a surface from an image file or a uint8 array.

        Args:
            image: Path to an image file (loaded with Pillow and converted to
                RGBA), or an (H, W, 3) / (H, W, 4) uint8 array.
        """
        if isinstance(image, (str, Path)):
            Image = _import_pil()
            with Image.open(image) as img:
                pixels = np.array(img.convert("RGBA"), dtype=np.uint8)
        elif isinstance(image, np.ndarray):
            pixels = image
        else:
            raise TypeError(f"Expected file path or numpy array, got {type(image)}")

        surface = cls(0, 0)
        surface.put_image_data(pixels)
        return surface


def _validate_size(width: int, height: int) -> tuple[int, int]:
    width, height = int(width), int(height)
    if width < 0 or height < 0:
        raise ValueError(f"Surface size must be non-negative, got {width}x{height}")
    return width, height


def _import_pil():
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for image I/O. "
            "Install with: pip install huepick[image]"
        ) from e
    return Image
