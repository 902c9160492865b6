from elementary.model.diagnostic import Diagnostic, FixIt, Severity
from elementary.model.source import (
    LineIndex,
    SourceLocation,
    SourceSpan,
    TextEdit,
    apply_edits,
)
from elementary.model.syntax import (
    AccessLevel,
    Attribute,
    Declaration,
    FreestandingMacro,
    MacroArgument,
    Modifier,
    OtherDecl,
    PropertyBinding,
    TypeDecl,
    VariableDecl,
)

__all__ = [
    "AccessLevel",
    "Attribute",
    "Declaration",
    "Diagnostic",
    "FixIt",
    "FreestandingMacro",
    "LineIndex",
    "MacroArgument",
    "Modifier",
    "OtherDecl",
    "PropertyBinding",
    "Severity",
    "SourceLocation",
    "SourceSpan",
    "TextEdit",
    "TypeDecl",
    "VariableDecl",
    "apply_edits",
]
