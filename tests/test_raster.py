# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""Tests for the raster surface: fills, gradients, compositing and readback."""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from huepick.errors import UnparsableColor
from huepick.surface.raster import LinearGradient, Surface


def _solid(width, height, rgba):
    """Build a surface filled with one straight RGBA color."""
    data = np.zeros((height, width, 4), dtype=np.uint8)
    data[...] = rgba
    surface = Surface(0, 0)
    surface.put_image_data(data)
    return surface


class TestSurfaceLifecycle:

    def test_new_surface_not_ready(self):
        surface = Surface(4, 3)
        assert not surface.is_ready
        assert surface.pixels is None
        assert surface.get_pixel(0, 0) is None
        assert surface.get_image_data() is None
        assert surface.hue is None

    def test_fill_allocates(self):
        surface = Surface(4, 3)
        surface.fill_rect(0, 0, 4, 3, "red")
        assert surface.is_ready
        assert surface.pixels.shape == (3, 4, 4)

    def test_zero_size_never_ready(self):
        surface = Surface(0, 10)
        surface.fill_rect(0, 0, 10, 10, "red")
        assert not surface.is_ready

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            Surface(-1, 5)

    def test_resize_drops_buffer_and_hue(self):
        surface = Surface(4, 4)
        surface.fill_rect(0, 0, 4, 4, "red")
        surface.hue = 120
        surface.resize(8, 2)
        assert (surface.width, surface.height) == (8, 2)
        assert not surface.is_ready
        assert surface.hue is None

    def test_clear(self):
        surface = Surface(2, 2)
        surface.fill_rect(0, 0, 2, 2, "blue")
        surface.clear()
        assert_array_equal(surface.pixels, np.zeros((2, 2, 4), dtype=np.uint8))

    def test_pixels_view_read_only(self):
        surface = Surface(2, 2)
        surface.fill_rect(0, 0, 2, 2, "blue")
        with pytest.raises(ValueError):
            surface.pixels[0, 0] = 0

    def test_image_data_is_copy(self):
        surface = Surface(2, 2)
        surface.fill_rect(0, 0, 2, 2, "blue")
        data = surface.get_image_data()
        data[...] = 0
        assert surface.get_pixel(0, 0) == (0, 0, 255, 255)

    def test_invalid_composite_operation(self):
        with pytest.raises(ValueError):
            Surface(1, 1).composite_operation = "screen"


class TestSolidFill:

    def test_opaque(self):
        surface = Surface(3, 2)
        surface.fill_rect(0, 0, 3, 2, "rgb(255, 0, 0)")
        expected = np.zeros((2, 3, 4), dtype=np.uint8)
        expected[...] = (255, 0, 0, 255)
        assert_array_equal(surface.pixels, expected)

    def test_translucent_over_transparent(self):
        surface = Surface(1, 1)
        surface.fill_rect(0, 0, 1, 1, "rgba(255, 0, 0, 0.5)")
        assert surface.get_pixel(0, 0) == (255, 0, 0, 128)

    def test_translucent_over_opaque(self):
        surface = _solid(1, 1, (0, 0, 255, 255))
        surface.fill_rect(0, 0, 1, 1, "rgba(255, 0, 0, 0.5)")
        assert surface.get_pixel(0, 0) == (128, 0, 128, 255)

    def test_clipped_to_surface(self):
        surface = Surface(4, 4)
        surface.fill_rect(2, 2, 10, 10, "white")
        assert surface.get_pixel(1, 1) == (0, 0, 0, 0)
        assert surface.get_pixel(3, 3) == (255, 255, 255, 255)

    def test_negative_extent(self):
        surface = Surface(4, 4)
        surface.fill_rect(4, 4, -2, -2, "white")
        assert surface.get_pixel(1, 1) == (0, 0, 0, 0)
        assert surface.get_pixel(2, 2) == (255, 255, 255, 255)

    def test_unparsable_style(self):
        with pytest.raises(UnparsableColor):
            Surface(1, 1).fill_rect(0, 0, 1, 1, "notacolor")


class TestMultiply:

    def test_white_backdrop_keeps_source(self):
        surface = _solid(2, 2, (255, 255, 255, 255))
        surface.composite_operation = "multiply"
        surface.fill_rect(0, 0, 2, 2, "rgb(255, 0, 0)")
        assert surface.get_pixel(1, 1) == (255, 0, 0, 255)

    def test_channels_multiply(self):
        surface = _solid(1, 1, (128, 128, 128, 255))
        surface.composite_operation = "multiply"
        surface.fill_rect(0, 0, 1, 1, "rgb(255, 128, 0)")
        assert surface.get_pixel(0, 0) == (128, 64, 0, 255)

    def test_transparent_source_is_noop(self):
        surface = _solid(1, 1, (10, 20, 30, 255))
        surface.composite_operation = "multiply"
        surface.fill_rect(0, 0, 1, 1, "transparent")
        assert surface.get_pixel(0, 0) == (10, 20, 30, 255)

    def test_transparent_backdrop_shows_source(self):
        surface = Surface(1, 1)
        surface.composite_operation = "multiply"
        surface.fill_rect(0, 0, 1, 1, "rgb(0, 128, 255)")
        assert surface.get_pixel(0, 0) == (0, 128, 255, 255)


class TestLinearGradient:

    def test_offset_range(self):
        gradient = LinearGradient(0, 0, 10, 0)
        with pytest.raises(ValueError):
            gradient.add_color_stop(1.5, "red")
        with pytest.raises(ValueError):
            gradient.add_color_stop(-0.1, "red")

    def test_bad_stop_color(self):
        with pytest.raises(UnparsableColor):
            LinearGradient(0, 0, 10, 0).add_color_stop(0, "notacolor")

    def test_stops_sorted_stably(self):
        gradient = LinearGradient(0, 0, 10, 0)
        gradient.add_color_stop(1, "blue")
        gradient.add_color_stop(0.5, "red")
        gradient.add_color_stop(0.5, "lime")
        offsets = [offset for offset, _ in gradient.stops]
        assert offsets == [0.5, 0.5, 1.0]
        assert gradient.stops[0][1].r == 255
        assert gradient.stops[1][1].g == 255

    def test_samples_at_pixel_centres(self):
        surface = Surface(2, 1)
        gradient = surface.create_linear_gradient(0, 0, 2, 0)
        gradient.add_color_stop(0, "black")
        gradient.add_color_stop(1, "white")
        surface.fill_rect(0, 0, 2, 1, gradient)
        assert surface.get_pixel(0, 0) == (64, 64, 64, 255)
        assert surface.get_pixel(1, 0) == (191, 191, 191, 255)

    def test_clamps_beyond_ends(self):
        surface = Surface(10, 1)
        gradient = surface.create_linear_gradient(3, 0, 6, 0)
        gradient.add_color_stop(0, "red")
        gradient.add_color_stop(1, "blue")
        surface.fill_rect(0, 0, 10, 1, gradient)
        assert surface.get_pixel(0, 0) == (255, 0, 0, 255)
        assert surface.get_pixel(9, 0) == (0, 0, 255, 255)

    def test_vertical(self):
        surface = Surface(1, 10)
        gradient = surface.create_linear_gradient(0, 0, 0, 10)
        gradient.add_color_stop(0, "white")
        gradient.add_color_stop(1, "black")
        surface.fill_rect(0, 0, 1, 10, gradient)
        column = surface.pixels[:, 0, 0].astype(int)
        assert np.all(np.diff(column) < 0)

    def test_premultiplied_interpolation(self):
        """Fading to transparent keeps the hue instead of darkening."""
        surface = Surface(2, 1)
        gradient = surface.create_linear_gradient(0, 0, 2, 0)
        gradient.add_color_stop(0, "rgba(255, 0, 0, 1)")
        gradient.add_color_stop(1, "rgba(0, 0, 255, 0)")
        surface.fill_rect(0, 0, 2, 1, gradient)
        r, g, b, a = surface.get_pixel(1, 0)
        assert (r, g, b) == (255, 0, 0)
        assert a == 64

    def test_degenerate_paints_nothing(self):
        surface = _solid(2, 2, (0, 0, 255, 255))
        gradient = surface.create_linear_gradient(1, 1, 1, 1)
        gradient.add_color_stop(0, "red")
        gradient.add_color_stop(1, "red")
        assert gradient.is_degenerate
        surface.fill_rect(0, 0, 2, 2, gradient)
        assert surface.get_pixel(0, 0) == (0, 0, 255, 255)

    def test_no_stops_is_transparent(self):
        gradient = LinearGradient(0, 0, 4, 0)
        sampled = gradient.sample(np.array([0.5, 3.5]), np.array([0.5, 0.5]))
        assert_array_equal(sampled, np.zeros((2, 4)))


class TestReadback:

    def test_out_of_bounds_is_transparent(self):
        surface = _solid(2, 2, (9, 9, 9, 255))
        assert surface.get_pixel(-1, 0) == (0, 0, 0, 0)
        assert surface.get_pixel(2, 0) == (0, 0, 0, 0)
        assert surface.get_pixel(0, 5) == (0, 0, 0, 0)

    def test_negative_fraction_is_out_of_bounds(self):
        surface = _solid(2, 2, (9, 9, 9, 255))
        assert surface.get_pixel(-0.5, 0) == (0, 0, 0, 0)
        assert surface.get_pixel(0, -0.25) == (0, 0, 0, 0)
        assert surface.get_pixel(0.5, 0.5) == (9, 9, 9, 255)

    def test_fractional_coordinates_floor(self):
        data = np.zeros((1, 2, 4), dtype=np.uint8)
        data[0, 1] = (1, 2, 3, 255)
        surface = Surface.from_image(data)
        assert surface.get_pixel(1.9, 0.2) == (1, 2, 3, 255)
        assert surface.get_pixel(0.9, 0) == (0, 0, 0, 0)

    def test_put_rgb_is_opaque(self):
        surface = Surface(0, 0)
        surface.put_image_data(np.full((2, 3, 3), 7, dtype=np.uint8))
        assert (surface.width, surface.height) == (3, 2)
        assert surface.get_pixel(2, 1) == (7, 7, 7, 255)

    def test_put_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            Surface(1, 1).put_image_data(np.zeros((2, 2), dtype=np.uint8))
        with pytest.raises(ValueError):
            Surface(1, 1).put_image_data(np.zeros((2, 2, 5), dtype=np.uint8))

    def test_put_rejects_bad_dtype(self):
        with pytest.raises(ValueError):
            Surface(1, 1).put_image_data(np.zeros((2, 2, 4), dtype=np.float32))

    def test_from_image_rejects_other_types(self):
        with pytest.raises(TypeError):
            Surface.from_image([[0, 0, 0]])


class TestImageIO:

    def test_save_and_load(self, tmp_path):
        pytest.importorskip("PIL")
        surface = Surface(3, 2)
        surface.fill_rect(0, 0, 3, 2, "rgba(10, 200, 30, 1)")
        surface.fill_rect(0, 0, 1, 1, "black")

        path = tmp_path / "surface.png"
        surface.save(path)
        loaded = Surface.from_image(path)

        assert (loaded.width, loaded.height) == (3, 2)
        assert_array_equal(loaded.pixels, surface.pixels)

    def test_to_image(self):
        pytest.importorskip("PIL")
        surface = Surface(2, 2)
        surface.fill_rect(0, 0, 2, 2, "red")
        image = surface.to_image()
        assert image.mode == "RGBA"
        assert image.size == (2, 2)
        assert image.getpixel((1, 1)) == (255, 0, 0, 255)

    def test_to_image_requires_pixels(self):
        pytest.importorskip("PIL")
        with pytest.raises(ValueError):
            Surface(2, 2).to_image()
