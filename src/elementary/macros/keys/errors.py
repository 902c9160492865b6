"""Errors raised by the property key macros."""

from __future__ import annotations

from elementary.macros.error import MacroError


class KeyMacroError(MacroError):
    """Base class for ``@EnvironmentValue`` / ``@FocusValue`` errors."""

    _message = ""

    @property
    def message(self) -> str:
        return self._message


class InvalidPropertyType(KeyMacroError):
    code = "invalid_property_type"
    _message = "The applied macro is only valid for 'var' properties"


class InvalidPropertyDeclaration(KeyMacroError):
    code = "invalid_declaration"
    _message = "Invalid property declaration"


class MissingDefaultValue(KeyMacroError):
    code = "missing_default_value"
    _message = (
        "Property declaration requires an initializer expression or an explicitly stated getter"
    )


class MissingTypeAnnotation(KeyMacroError):
    code = "missing_type_annotation"
    _message = "Property declaration requires an optional type annotation"


class InvalidOptionalTypeAnnotation(KeyMacroError):
    code = "invalid_optional_type_annotation"
    _message = "Property type must be optional"
