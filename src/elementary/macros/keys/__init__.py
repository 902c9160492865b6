from elementary.macros.keys.base import KeyMacro
from elementary.macros.keys.environment import EnvironmentKeyMacro
from elementary.macros.keys.errors import (
    InvalidOptionalTypeAnnotation,
    InvalidPropertyDeclaration,
    InvalidPropertyType,
    KeyMacroError,
    MissingDefaultValue,
    MissingTypeAnnotation,
)
from elementary.macros.keys.focused import FocusedValueMacro

__all__ = [
    "KeyMacro",
    "EnvironmentKeyMacro",
    "FocusedValueMacro",
    "KeyMacroError",
    "InvalidPropertyType",
    "InvalidPropertyDeclaration",
    "MissingDefaultValue",
    "MissingTypeAnnotation",
    "InvalidOptionalTypeAnnotation",
]
