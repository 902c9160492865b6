"""``#color`` and ``#unsafeColor`` expression macros."""

from __future__ import annotations

from elementary.hexcolor import HexColorDecoderError, decode
from elementary.macros.base import MacroExpansionContext
from elementary.macros.error import MacroError
from elementary.model.syntax import FreestandingMacro


class HexColorMacroError(MacroError):
    """Base class for hex color macro errors."""


class MissingHex(HexColorMacroError):
    code = "missing_hex"

    @property
    def message(self) -> str:
        return "Could not detect a hex string to decode"


class HexDecodingError(HexColorMacroError):
    """A decoder failure surfaced at the macro site."""

    def __init__(self, error: HexColorDecoderError):
        self.error = error
        super().__init__(error)

    @property
    def code(self) -> str:  # type: ignore[override]
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message


class HexColorMacro:
    """``#color("676C60")``: a color literal validated at build time.

    Expands to ``Color(red: 103/255, green: 108/255, blue: 96/255, opacity: 255/255)``.
    """

    def expand_expression(self, node: FreestandingMacro, context: MacroExpansionContext) -> str:
        hex = node.arguments[0].string_literal if node.arguments else None
        if hex is None:
            raise MissingHex()
        try:
            color = decode(hex)
        except HexColorDecoderError as e:
            raise HexDecodingError(e) from e

        return (
            f"{context.config.color_type}(red: {color.red}/255, green: {color.green}/255, "
            f"blue: {color.blue}/255, opacity: {color.opacity}/255)"
        )


class UnsafeHexColorMacro:
    """``#unsafeColor(hex)``: a color decoded at runtime, falling back to white."""

    def expand_expression(self, node: FreestandingMacro, context: MacroExpansionContext) -> str:
        if not node.arguments:
            raise MissingHex()
        return f"{context.config.color_type}(hex: {node.arguments[0].expression})"
