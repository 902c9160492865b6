"""Errors raised by ``@Stylable``."""

from __future__ import annotations

from elementary.macros.error import MacroError
from elementary.model.diagnostic import Severity


class StylableMacroError(MacroError):
    """Base class for ``@Stylable`` errors."""


class MissingViewConformance(StylableMacroError):
    """The attached type does not list ``View`` among its inherited types.

    Advisory only: expansion continues.
    """

    code = "missing_view_conformance"

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    @property
    def message(self) -> str:
        return f"'{self.name}' does not conform to protocol 'View'"

    @property
    def severity(self) -> Severity:
        return Severity.NOTE


class InvalidTypeDeclaration(StylableMacroError):
    code = "invalid_type_declaration"

    @property
    def message(self) -> str:
        return "Invalid type declaration"


class InvalidAccessModifier(StylableMacroError):
    code = "invalid_access_modifier"

    def __init__(self, modifier: str):
        self.modifier = modifier
        super().__init__(modifier)

    @property
    def message(self) -> str:
        return f"The access level '{self.modifier}' is invalid."
