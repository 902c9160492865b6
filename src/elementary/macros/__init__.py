"""Macro implementations and the roles the expander drives them through."""

from elementary.macros.base import (
    AccessorMacro,
    ExpressionMacro,
    ExtensionMacro,
    MacroExpansionContext,
    PeerMacro,
    with_error_handling,
)
from elementary.macros.error import MacroError, MacroErrorFixItWrapper, fix_it
from elementary.macros.hex_color import (
    HexColorMacro,
    HexColorMacroError,
    HexDecodingError,
    MissingHex,
    UnsafeHexColorMacro,
)
from elementary.macros.keys import EnvironmentKeyMacro, FocusedValueMacro
from elementary.macros.stylable import StylableMacro

__all__ = [
    "AccessorMacro",
    "PeerMacro",
    "ExtensionMacro",
    "ExpressionMacro",
    "MacroExpansionContext",
    "with_error_handling",
    "MacroError",
    "MacroErrorFixItWrapper",
    "fix_it",
    "EnvironmentKeyMacro",
    "FocusedValueMacro",
    "StylableMacro",
    "HexColorMacro",
    "UnsafeHexColorMacro",
    "HexColorMacroError",
    "HexDecodingError",
    "MissingHex",
]
