"""Registry mapping macro names to macro implementations."""

from __future__ import annotations

from elementary.macros.base import AccessorMacro, ExpressionMacro, ExtensionMacro, PeerMacro
from elementary.macros.hex_color import HexColorMacro, UnsafeHexColorMacro
from elementary.macros.keys import EnvironmentKeyMacro, FocusedValueMacro
from elementary.macros.stylable import StylableMacro


def macro_roles(macro: object) -> list[str]:
    """Names of the roles *macro* implements, in expansion order."""
    roles: list[str] = []
    if isinstance(macro, AccessorMacro):
        roles.append("accessor")
    if isinstance(macro, PeerMacro):
        roles.append("peer")
    if isinstance(macro, ExtensionMacro):
        roles.append("extension")
    if isinstance(macro, ExpressionMacro):
        roles.append("expression")
    return roles


class MacroRegistry:
    """Maps macro names (without ``@``/``#``) to implementations.

    Macros implementing ExpressionMacro are freestanding (``#name``); all
    others are attached (``@name``).
    """

    def __init__(self) -> None:
        self._attached: dict[str, object] = {}
        self._freestanding: dict[str, ExpressionMacro] = {}

    def register(self, name: str, macro: object) -> None:
        """Register *macro* under *name*."""
        if isinstance(macro, ExpressionMacro):
            self._freestanding[name] = macro
        elif macro_roles(macro):
            self._attached[name] = macro
        else:
            raise TypeError(f"{type(macro).__name__} implements no macro role")

    def attached(self, name: str) -> object | None:
        return self._attached.get(name)

    def freestanding(self, name: str) -> ExpressionMacro | None:
        return self._freestanding.get(name)

    @property
    def attached_names(self) -> frozenset[str]:
        return frozenset(self._attached)

    @property
    def freestanding_names(self) -> frozenset[str]:
        return frozenset(self._freestanding)

    def entries(self) -> list[tuple[str, object]]:
        """All registrations as ``(spelling, macro)``, attached first."""
        attached = [(f"@{name}", macro) for name, macro in sorted(self._attached.items())]
        freestanding = [(f"#{name}", macro) for name, macro in sorted(self._freestanding.items())]
        return attached + freestanding


def create_default_registry() -> MacroRegistry:
    """Create a MacroRegistry with every built-in macro registered."""
    registry = MacroRegistry()

    # Property keys
    registry.register("EnvironmentValue", EnvironmentKeyMacro())
    focused = FocusedValueMacro()
    registry.register("FocusValue", focused)
    registry.register("FocusedValue", focused)

    # Styling
    registry.register("Stylable", StylableMacro())

    # Colors
    registry.register("color", HexColorMacro())
    registry.register("unsafeColor", UnsafeHexColorMacro())

    return registry
