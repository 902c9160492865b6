"""Lark Transformer that converts Swift declaration parse trees into syntax nodes."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import LarkError

from elementary.model.source import SourceSpan
from elementary.model.syntax import (
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
from elementary.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class _Sentinel:
    """Intermediate objects returned by rules and consumed by their parents."""


class _Fragment(_Sentinel):
    """A type or expression, kept as its source text."""

    def __init__(self, text: str, span: SourceSpan):
        self.text = text
        self.span = span


class _Pattern(_Sentinel):
    def __init__(self, name: str | None, span: SourceSpan):
        self.name = name
        self.span = span


class _TypeAnnotation(_Sentinel):
    def __init__(self, fragment: _Fragment):
        self.fragment = fragment


class _Initializer(_Sentinel):
    def __init__(self, fragment: _Fragment):
        self.fragment = fragment


class _GenericParameters(_Sentinel):
    def __init__(self, names: list[str]):
        self.names = names


class _Inheritance(_Sentinel):
    def __init__(self, types: list[str]):
        self.types = types


class _VariableBody(_Sentinel):
    def __init__(self, binding_specifier: str, bindings: list[PropertyBinding]):
        self.binding_specifier = binding_specifier
        self.bindings = bindings


class _TypeBody(_Sentinel):
    def __init__(
        self,
        keyword: str,
        name: str,
        generic_parameters: list[str],
        inheritance: list[str],
    ):
        self.keyword = keyword
        self.name = name
        self.generic_parameters = generic_parameters
        self.inheritance = inheritance


class _OtherBody(_Sentinel):
    def __init__(self, keyword: str):
        self.keyword = keyword


class SwiftTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into syntax nodes.

    Spans are shifted by *offset* so they point into the enclosing file
    rather than into the parsed snippet.
    """

    def __init__(self, text: str, offset: int = 0):
        super().__init__()
        self._text = text
        self._offset = offset

    def _span(self, meta) -> SourceSpan:  # type: ignore[no-untyped-def]
        return SourceSpan(meta.start_pos + self._offset, meta.end_pos + self._offset)

    def _fragment(self, meta) -> _Fragment:  # type: ignore[no-untyped-def]
        return _Fragment(self._text[meta.start_pos : meta.end_pos], self._span(meta))

    # ---- types & expressions ----

    @v_args(meta=True)
    def type_expr(self, meta, children: list[Token]) -> _Fragment:  # type: ignore[no-untyped-def]
        return self._fragment(meta)

    @v_args(meta=True)
    def expression(self, meta, children: list[Token]) -> _Fragment:  # type: ignore[no-untyped-def]
        return self._fragment(meta)

    # ---- attributes & modifiers ----

    def labeled_argument(self, items: list[object]) -> MacroArgument:
        fragment: _Fragment = items[1]  # type: ignore[assignment]
        label = str(items[0]).rstrip(":").rstrip()
        return MacroArgument(label=label, expression=fragment.text, span=fragment.span)

    def unlabeled_argument(self, items: list[_Fragment]) -> MacroArgument:
        return MacroArgument(label=None, expression=items[0].text, span=items[0].span)

    def arguments(self, items: list[MacroArgument]) -> list[MacroArgument]:
        return list(items)

    def attribute_name(self, items: list[Token]) -> str:
        return ".".join(str(t) for t in items)

    @v_args(meta=True)
    def attribute(self, meta, children: list[object]) -> Attribute:  # type: ignore[no-untyped-def]
        arguments = children[1] if len(children) > 1 else None
        return Attribute(
            name=str(children[0]),
            arguments=arguments,  # type: ignore[arg-type]
            span=self._span(meta),
        )

    def modifier(self, items: list[Token]) -> Modifier:
        detail = str(items[1]) if len(items) > 1 else None
        return Modifier(name=str(items[0]), detail=detail)

    # ---- variables ----

    @v_args(meta=True)
    def identifier_pattern(self, meta, children: list[Token]) -> _Pattern:  # type: ignore[no-untyped-def]
        return _Pattern(str(children[0]), self._span(meta))

    @v_args(meta=True)
    def tuple_pattern(self, meta, children: list[_Pattern]) -> _Pattern:  # type: ignore[no-untyped-def]
        return _Pattern(None, self._span(meta))

    def type_annotation(self, items: list[_Fragment]) -> _TypeAnnotation:
        return _TypeAnnotation(items[0])

    def initializer(self, items: list[_Fragment]) -> _Initializer:
        return _Initializer(items[0])

    @v_args(meta=True)
    def property_binding(self, meta, children: list[_Sentinel]) -> PropertyBinding:  # type: ignore[no-untyped-def]
        pattern: _Pattern = children[0]  # type: ignore[assignment]
        annotation = next((c for c in children if isinstance(c, _TypeAnnotation)), None)
        init = next((c for c in children if isinstance(c, _Initializer)), None)
        return PropertyBinding(
            name=pattern.name,
            pattern_span=pattern.span,
            type_annotation=annotation.fragment.text if annotation else None,
            type_span=annotation.fragment.span if annotation else None,
            initializer=init.fragment.text if init else None,
            initializer_span=init.fragment.span if init else None,
            span=self._span(meta),
        )

    def variable_decl(self, items: list[object]) -> _VariableBody:
        return _VariableBody(str(items[0]), list(items[1:]))  # type: ignore[arg-type]

    # ---- types ----

    def type_name(self, items: list[Token]) -> str:
        return ".".join(str(t) for t in items)

    def generic_parameter(self, items: list[object]) -> str:
        return str(items[0])

    def generic_parameters(self, items: list[str]) -> _GenericParameters:
        return _GenericParameters(list(items))

    def inheritance_clause(self, items: list[_Fragment]) -> _Inheritance:
        return _Inheritance([f.text for f in items])

    def type_decl(self, items: list[object]) -> _TypeBody:
        generics: list[str] = []
        inheritance: list[str] = []
        for item in items[2:]:
            if isinstance(item, _GenericParameters):
                generics = item.names
            elif isinstance(item, _Inheritance):
                inheritance = item.types
        return _TypeBody(str(items[0]), str(items[1]), generics, inheritance)

    def other_decl(self, items: list[Token]) -> _OtherBody:
        return _OtherBody(str(items[0]))

    # ---- roots ----

    @v_args(meta=True)
    def declaration(self, meta, children: list[object]) -> Declaration:  # type: ignore[no-untyped-def]
        attributes = [c for c in children if isinstance(c, Attribute)]
        modifiers = [c for c in children if isinstance(c, Modifier)]
        body = children[-1]
        span = self._span(meta)

        if isinstance(body, _VariableBody):
            return VariableDecl(
                binding_specifier=body.binding_specifier,
                bindings=body.bindings,
                attributes=attributes,
                modifiers=modifiers,
                span=span,
            )
        if isinstance(body, _TypeBody):
            return TypeDecl(
                keyword=body.keyword,
                name=body.name,
                generic_parameters=body.generic_parameters,
                inheritance=body.inheritance,
                attributes=attributes,
                modifiers=modifiers,
                span=span,
            )
        return OtherDecl(
            keyword=body.keyword,  # type: ignore[attr-defined]
            attributes=attributes,
            modifiers=modifiers,
            span=span,
        )

    @v_args(meta=True)
    def freestanding(self, meta, children: list[object]) -> FreestandingMacro:  # type: ignore[no-untyped-def]
        arguments = children[1] if len(children) > 1 else []
        return FreestandingMacro(
            name=str(children[0]),
            arguments=arguments,  # type: ignore[arg-type]
            span=self._span(meta),
        )


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start=["declaration", "freestanding"],
        propagate_positions=True,
    )


def _parse(text: str, start: str, offset: int) -> object:
    try:
        tree = _parser().parse(text, start=start)
    except LarkError as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    return SwiftTransformer(text, offset).transform(tree)


def parse_declaration(text: str, offset: int = 0) -> Declaration:
    """Parse a declaration header (attributes, modifiers and the declaration).

    For type declarations *text* ends before the opening brace of the body.
    """
    return _parse(text, "declaration", offset)  # type: ignore[return-value]


def parse_freestanding(text: str, offset: int = 0) -> FreestandingMacro:
    """Parse a ``#name(arguments)`` macro expression."""
    return _parse(text, "freestanding", offset)  # type: ignore[return-value]
