# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""Tests for CSS color-string resolution."""

import pytest

from huepick.errors import UnparsableColor
from huepick.schema import RGB
from huepick.color.css import resolve


class TestHex:

    def test_six_digits(self):
        assert resolve("#ff0000") == RGB(255, 0, 0, 1.0)

    def test_case_insensitive(self):
        assert resolve("#FF8000") == resolve("#ff8000") == RGB(255, 128, 0)

    def test_three_digits(self):
        assert resolve("#0f0") == RGB(0, 255, 0)

    def test_four_digits_alpha(self):
        rgb = resolve("#0f08")
        assert (rgb.r, rgb.g, rgb.b) == (0, 255, 0)
        assert rgb.a == pytest.approx(0x88 / 255)

    def test_eight_digits_alpha(self):
        rgb = resolve("#ff000080")
        assert (rgb.r, rgb.g, rgb.b) == (255, 0, 0)
        assert rgb.a == pytest.approx(128 / 255)

    @pytest.mark.parametrize("value", ["#12345", "#1234567", "#ggg", "ff0000", "#"])
    def test_bad_lengths_and_digits(self, value):
        with pytest.raises(UnparsableColor):
            resolve(value)


class TestRGBFunction:

    def test_legacy(self):
        assert resolve("rgb(10,20,30)") == RGB(10, 20, 30)

    def test_legacy_with_alpha(self):
        assert resolve("rgba(10, 20, 30, 0.5)") == RGB(10, 20, 30, 0.5)

    def test_rgb_accepts_alpha(self):
        assert resolve("rgb(10, 20, 30, .25)") == RGB(10, 20, 30, 0.25)

    def test_space_syntax(self):
        assert resolve("rgb(10 20 30)") == RGB(10, 20, 30)

    def test_space_syntax_percent_alpha(self):
        assert resolve("rgb(10 20 30 / 50%)") == RGB(10, 20, 30, 0.5)

    def test_percent_channels(self):
        assert resolve("rgb(100%, 0%, 0%)") == RGB(255, 0, 0)
        assert resolve("rgb(50%, 50%, 50%)") == RGB(128, 128, 128)

    def test_channels_clamped_and_rounded(self):
        assert resolve("rgb(300, -5, 12.5)") == RGB(255, 0, 13)

    def test_alpha_clamped(self):
        assert resolve("rgba(0, 0, 0, 2)").a == 1.0
        assert resolve("rgba(0, 0, 0, -1)").a == 0.0

    def test_case_and_whitespace(self):
        assert resolve("  RGB( 1 , 2 , 3 )  ") == RGB(1, 2, 3)

    @pytest.mark.parametrize(
        "value",
        [
            "rgb(1,2)",
            "rgb(1, 2, 3, 4, 5)",
            "rgb(1,2,3,)",
            "rgb(255, 50%, 0)",
            "rgb(1 2 3 / )",
            "rgb(1, 2, 3 / 0.5)",
            "rgb(1 2)",
            "rgb(1deg, 2, 3)",
            "rgb(a, b, c)",
            "rgb(1, 2, 3",
        ],
    )
    def test_malformed(self, value):
        with pytest.raises(UnparsableColor):
            resolve(value)


class TestHSLFunction:

    def test_legacy(self):
        assert resolve("hsl(120, 100%, 50%)") == RGB(0, 255, 0)

    def test_legacy_with_alpha(self):
        assert resolve("hsla(240, 100%, 50%, 0.25)") == RGB(0, 0, 255, 0.25)

    def test_space_syntax(self):
        assert resolve("hsl(120 100% 50% / 25%)") == RGB(0, 255, 0, 0.25)

    def test_hue_units(self):
        assert resolve("hsl(120deg, 100%, 50%)") == RGB(0, 255, 0)
        assert resolve("hsl(0.5turn 100% 50%)") == RGB(0, 255, 255)
        assert resolve("hsl(200grad 100% 50%)") == RGB(0, 255, 255)
        assert resolve("hsl(3.141592653589793rad 100% 50%)") == RGB(0, 255, 255)

    def test_hue_wraps(self):
        assert resolve("hsl(480, 100%, 50%)") == RGB(0, 255, 0)
        assert resolve("hsl(-240, 100%, 50%)") == RGB(0, 255, 0)

    def test_gray(self):
        assert resolve("hsl(0, 0%, 50%)") == RGB(128, 128, 128)

    def test_legacy_requires_percent(self):
        with pytest.raises(UnparsableColor):
            resolve("hsl(120, 100, 50)")

    def test_percent_hue_rejected(self):
        with pytest.raises(UnparsableColor):
            resolve("hsl(50%, 100%, 50%)")


class TestKeywords:

    def test_named(self):
        assert resolve("rebeccapurple") == RGB(102, 51, 153)
        assert resolve("Tomato") == RGB(255, 99, 71)

    def test_transparent(self):
        assert resolve("transparent") == RGB(0, 0, 0, 0.0)

    @pytest.mark.parametrize(
        "name, channels",
        [
            ("black", (0, 0, 0)),
            ("white", (255, 255, 255)),
            ("aliceblue", (240, 248, 255)),
            ("darkolivegreen", (85, 107, 47)),
            ("yellowgreen", (154, 205, 50)),
            ("grey", (128, 128, 128)),
        ],
    )
    def test_css_table(self, name, channels):
        assert resolve(name) == RGB(*channels)


class TestOtherFunctions:

    def test_color_function(self):
        assert resolve("color(srgb 1 0 0)") == RGB(255, 0, 0)

    def test_hwb(self):
        assert resolve("hwb(120 0% 0%)") == RGB(0, 255, 0)

    def test_wide_gamut_clipped_to_srgb(self):
        assert resolve("color(display-p3 0 1 0)") == RGB(0, 255, 0)


class TestUnparsable:

    @pytest.mark.parametrize("value", ["", "   ", "notacolor", "red blue", "foo(0, 0%, 0%)"])
    def test_rejected_strings(self, value):
        with pytest.raises(UnparsableColor):
            resolve(value)

    def test_chains_parser_error(self):
        with pytest.raises(UnparsableColor) as excinfo:
            resolve("rgb(1, 2)")
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_non_string(self):
        with pytest.raises(UnparsableColor):
            resolve(None)

    def test_error_carries_value(self):
        with pytest.raises(UnparsableColor) as excinfo:
            resolve("notacolor")
        assert excinfo.value.value == "notacolor"
        assert "notacolor" in str(excinfo.value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            resolve("notacolor")
