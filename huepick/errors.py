# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""Exceptions raised by Huepick."""


class InvalidFormat(ValueError):
    """A hex color string is not exactly six hex digits."""


class UnparsableColor(ValueError):
    """A color string could not be resolved to a concrete RGB triple."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Could not parse color: {value!r}")
        self.value = value
