"""Hexadecimal color decoder.

Usage::

    components = decode("ffffff")    # the '#' prefix is optional
    components.opacity               # 255
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from elementary.hexcolor.errors import (
    DecodingFailed,
    HexColorDecoderError,
    InvalidCharacters,
    InvalidLength,
)

_HEX_DIGITS = frozenset(string.hexdigits)

# Appended to 6-digit hexes so they decode fully opaque.
_OPAQUE_SUFFIX = "ff"


@dataclass(frozen=True)
class ColorComponents:
    """RGBA channels of a decoded hex color, each in ``[0, 255]``."""

    red: int
    green: int
    blue: int
    opacity: int

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.opacity)

    def normalized(self) -> tuple[float, float, float, float]:
        """Return the channels scaled to ``[0, 1]``."""
        return tuple(channel / 255 for channel in self.as_tuple())  # type: ignore[return-value]


WHITE = ColorComponents(red=255, green=255, blue=255, opacity=255)


def _cleaned(hex: str) -> str:
    """Validate *hex* and return it as exactly 8 hex digits.

    Raises:
        InvalidCharacters: if any character (after the optional ``#``) is
            not a hex digit.
        InvalidLength: if the remaining string is not 6 or 8 characters.
    """
    cleaned = hex[1:] if hex.startswith("#") else hex

    invalid = [char for char in cleaned if char not in _HEX_DIGITS]
    if invalid:
        raise InvalidCharacters(hex, invalid)

    if len(cleaned) == 8:
        return cleaned
    if len(cleaned) == 6:
        return cleaned + _OPAQUE_SUFFIX
    raise InvalidLength(hex)


def _components(number: int) -> ColorComponents:
    return ColorComponents(
        red=(number & 0xFF000000) >> 24,
        green=(number & 0x00FF0000) >> 16,
        blue=(number & 0x0000FF00) >> 8,
        opacity=number & 0x000000FF,
    )


def decode(hex: str) -> ColorComponents:
    """Decode a hex color string into its RGBA components.

    Accepts ``RRGGBB`` or ``RRGGBBAA`` with an optional leading ``#``.
    Six-digit colors are fully opaque.

    Raises:
        HexColorDecoderError: one of :class:`InvalidCharacters`,
            :class:`InvalidLength` or :class:`DecodingFailed`.
    """
    cleaned = _cleaned(hex)
    try:
        number = int(cleaned, 16)
    except ValueError as exc:
        raise DecodingFailed(hex) from exc
    return _components(number)


def decode_or_default(hex: str, default: ColorComponents = WHITE) -> ColorComponents:
    """Decode *hex*, falling back to *default* when it is invalid."""
    try:
        return decode(hex)
    except HexColorDecoderError:
        return default
