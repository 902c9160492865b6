"""Syntax nodes for the parts of Swift declarations that macros inspect.

Types and expressions are not modelled structurally; they are kept as the
exact source text they were parsed from, together with their span.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from elementary.model.source import SourceSpan

_STRING_LITERAL = re.compile(r'"((?:[^"\\\n]|\\.)*)"')
_RAW_STRING_LITERAL = re.compile(r'(#+)"((?:(?!"\1)[^\n])*)"\1')

# Keywords introducing nominal types, the only ones that have a type name.
NOMINAL_TYPE_KEYWORDS = frozenset({"struct", "class", "enum", "actor"})


class AccessLevel(Enum):
    """Swift access levels."""

    PUBLIC = "public"
    PACKAGE = "package"
    INTERNAL = "internal"
    PRIVATE = "private"
    FILEPRIVATE = "fileprivate"
    OPEN = "open"

    @classmethod
    def parse(cls, raw: str) -> AccessLevel | None:
        """Parse ``public`` or ``.public``; return None for anything else."""
        text = raw.strip()
        if text.startswith("."):
            text = text[1:]
        try:
            return cls(text)
        except ValueError:
            return None

    @property
    def modifier(self) -> str:
        """The access level as a declaration prefix, e.g. ``"public "``."""
        return f"{self.value} "


def strip_backticks(name: str) -> str:
    if len(name) >= 2 and name.startswith("`") and name.endswith("`"):
        return name[1:-1]
    return name


@dataclass(frozen=True)
class MacroArgument:
    """One argument in a macro's argument list, e.g. ``style: "MyStyle"``."""

    label: str | None
    expression: str
    span: SourceSpan | None = None

    @property
    def string_literal(self) -> str | None:
        """Content of a single-line string literal argument, without interpolation.

        Raw strings (``#"ffffff"#``) count; their interpolation marker carries
        the same number of ``#`` as the delimiter.
        """
        match = _STRING_LITERAL.fullmatch(self.expression)
        if match is not None:
            content, marker = match.group(1), "\\("
        else:
            match = _RAW_STRING_LITERAL.fullmatch(self.expression)
            if match is None:
                return None
            content, marker = match.group(2), "\\" + match.group(1) + "("
        if marker in content:
            return None
        return content

    @property
    def value(self) -> str:
        """The argument reduced to the name it denotes.

        ``"MyStyle"`` -> ``MyStyle``, ``MyConfig.self`` -> ``MyConfig``,
        ``.public`` -> ``public``.
        """
        literal = self.string_literal
        if literal is not None:
            return literal
        text = self.expression
        if text.endswith(".self"):
            text = text[: -len(".self")]
        if text.startswith("."):
            text = text[1:]
        return text.strip()


@dataclass(frozen=True)
class Attribute:
    """An attribute such as ``@Stylable(style: "S")``.

    ``arguments`` is None when the attribute has no parenthesized list.
    """

    name: str
    arguments: list[MacroArgument] | None = None
    span: SourceSpan | None = None


@dataclass(frozen=True)
class Modifier:
    """A declaration modifier, e.g. ``public``, ``static`` or ``private(set)``."""

    name: str
    detail: str | None = None

    @property
    def access_level(self) -> AccessLevel | None:
        if self.detail is not None:
            return None
        return AccessLevel.parse(self.name)


@dataclass(frozen=True)
class PropertyBinding:
    """A single ``pattern[: Type][ = value]`` entry of a variable declaration."""

    name: str | None
    pattern_span: SourceSpan | None = None
    type_annotation: str | None = None
    type_span: SourceSpan | None = None
    initializer: str | None = None
    initializer_span: SourceSpan | None = None
    span: SourceSpan | None = None

    @property
    def identifier(self) -> str | None:
        return strip_backticks(self.name) if self.name is not None else None

    @property
    def initializer_clause_span(self) -> SourceSpan | None:
        """Span of `` = value``, from the end of the pattern or type."""
        if self.initializer_span is None:
            return None
        preceding = self.type_span or self.pattern_span
        if preceding is None:
            return None
        return SourceSpan(preceding.end, self.initializer_span.end)

    @property
    def is_optional(self) -> bool:
        return self.type_annotation is not None and self.type_annotation.endswith("?")

    @property
    def wrapped_type(self) -> str | None:
        """The type inside an optional annotation (``Bool?`` -> ``Bool``)."""
        if not self.is_optional:
            return None
        return self.type_annotation[:-1].rstrip()  # type: ignore[index]


class Declaration:
    """Behaviour shared by every parsed declaration."""

    attributes: list[Attribute]
    modifiers: list[Modifier]

    @property
    def access_level(self) -> AccessLevel | None:
        for modifier in self.modifiers:
            level = modifier.access_level
            if level is not None:
                return level
        return None

    @property
    def inherited_types(self) -> list[str]:
        return []

    @property
    def type_name(self) -> str | None:
        return None


@dataclass(frozen=True)
class VariableDecl(Declaration):
    binding_specifier: str
    bindings: list[PropertyBinding] = field(default_factory=list)
    attributes: list[Attribute] = field(default_factory=list)
    modifiers: list[Modifier] = field(default_factory=list)
    span: SourceSpan | None = None


@dataclass(frozen=True)
class TypeDecl(Declaration):
    keyword: str
    name: str
    generic_parameters: list[str] = field(default_factory=list)
    inheritance: list[str] = field(default_factory=list)
    attributes: list[Attribute] = field(default_factory=list)
    modifiers: list[Modifier] = field(default_factory=list)
    span: SourceSpan | None = None

    @property
    def inherited_types(self) -> list[str]:
        return list(self.inheritance)

    @property
    def type_name(self) -> str | None:
        if self.keyword not in NOMINAL_TYPE_KEYWORDS:
            return None
        return strip_backticks(self.name)


@dataclass(frozen=True)
class OtherDecl(Declaration):
    """Functions, initializers and other declarations macros never expand."""

    keyword: str
    attributes: list[Attribute] = field(default_factory=list)
    modifiers: list[Modifier] = field(default_factory=list)
    span: SourceSpan | None = None


@dataclass(frozen=True)
class FreestandingMacro:
    """A ``#name(arguments)`` expression."""

    name: str
    arguments: list[MacroArgument] = field(default_factory=list)
    span: SourceSpan | None = None
