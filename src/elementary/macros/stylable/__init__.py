from elementary.macros.stylable.arguments import Argument, ArgumentFactory, lower_camel
from elementary.macros.stylable.declarations import DeclarationsFactory
from elementary.macros.stylable.errors import (
    InvalidAccessModifier,
    InvalidTypeDeclaration,
    MissingViewConformance,
    StylableMacroError,
)
from elementary.macros.stylable.macro import StylableMacro

__all__ = [
    "Argument",
    "ArgumentFactory",
    "DeclarationsFactory",
    "StylableMacro",
    "StylableMacroError",
    "MissingViewConformance",
    "InvalidTypeDeclaration",
    "InvalidAccessModifier",
    "lower_camel",
]
