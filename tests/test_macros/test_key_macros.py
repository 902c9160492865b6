"""Tests for @EnvironmentValue and @FocusValue."""

import pytest

from elementary.config import ExpansionConfig
from elementary.macros import EnvironmentKeyMacro, FocusedValueMacro, MacroExpansionContext
from elementary.macros.keys import (
    InvalidPropertyDeclaration,
    InvalidPropertyType,
    MissingDefaultValue,
    MissingTypeAnnotation,
)
from elementary.macros.keys.focused import optional_type
from elementary.model import LineIndex
from elementary.model.diagnostic import Severity
from elementary.parser import parse_declaration


def _expand(macro: object, text: str, context: MacroExpansionContext) -> tuple[list[str], list[str]]:
    decl = parse_declaration(text)
    node = decl.attributes[0]
    accessors = macro.provide_accessors(node, decl, context)  # type: ignore[attr-defined]
    peers = macro.provide_peers(node, decl, context)  # type: ignore[attr-defined]
    return accessors, peers


# ---------------------------------------------------------------------------
# Shared KeyMacro behaviour
# ---------------------------------------------------------------------------


class TestKeyMacro:
    def test_key_name(self) -> None:
        decl = parse_declaration("@EnvironmentValue var navigationTitle = \"Title\"")
        macro = EnvironmentKeyMacro()
        assert macro.key_name(macro.binding(decl)) == "EnvironmentKey_navigationTitle"

    def test_key_name_strips_backticks(self) -> None:
        decl = parse_declaration("@FocusValue var `default`: Bool?")
        macro = FocusedValueMacro()
        assert macro.key_name(macro.binding(decl)) == "FocusedValueKey_default"

    def test_let_is_rejected(self) -> None:
        decl = parse_declaration("@EnvironmentValue let x = 5")
        with pytest.raises(InvalidPropertyType):
            EnvironmentKeyMacro().binding(decl)

    def test_non_variable_is_rejected(self) -> None:
        decl = parse_declaration("@EnvironmentValue func f()")
        with pytest.raises(InvalidPropertyType):
            EnvironmentKeyMacro().binding(decl)

    def test_multiple_bindings_are_rejected(self) -> None:
        decl = parse_declaration("@EnvironmentValue var a = 1, b = 2")
        with pytest.raises(InvalidPropertyDeclaration):
            EnvironmentKeyMacro().binding(decl)

    def test_tuple_pattern_is_rejected(self) -> None:
        decl = parse_declaration("@EnvironmentValue var (a, b) = (1, 2)")
        macro = EnvironmentKeyMacro()
        with pytest.raises(InvalidPropertyDeclaration):
            macro.key_name(macro.binding(decl))

    def test_property_type(self) -> None:
        decl = parse_declaration("@FocusValue var signInFocus: String?")
        macro = FocusedValueMacro()
        assert macro.property_type(decl.attributes[0], decl) == "FocusedValueKey_signInFocus.Value"

    def test_accessors(self, context: MacroExpansionContext) -> None:
        accessors, _ = _expand(EnvironmentKeyMacro(), "@EnvironmentValue var title = \"\"", context)
        assert accessors == [
            "get {\n    return self[EnvironmentKey_title.self]\n}",
            "set(newValue) {\n    self[EnvironmentKey_title.self] = newValue\n}",
        ]


# ---------------------------------------------------------------------------
# @EnvironmentValue
# ---------------------------------------------------------------------------


class TestEnvironmentKeyMacro:
    def test_literal_initializer_becomes_default_value(self, context: MacroExpansionContext) -> None:
        accessors, peers = _expand(EnvironmentKeyMacro(), "@EnvironmentValue var x = 5", context)
        assert all("self[EnvironmentKey_x.self]" in accessor for accessor in accessors)
        assert peers == [
            "fileprivate struct EnvironmentKey_x: EnvironmentKey {\n"
            "    static let defaultValue = 5\n"
            "}"
        ]

    def test_peer_key(self, context: MacroExpansionContext) -> None:
        _, peers = _expand(EnvironmentKeyMacro(), "@EnvironmentValue var skeletonLoading = true", context)
        assert peers == [
            "fileprivate struct EnvironmentKey_skeletonLoading: EnvironmentKey {\n"
            "    static let defaultValue = true\n"
            "}"
        ]
        assert context.diagnostics == []

    def test_peer_keeps_type_annotation(self, context: MacroExpansionContext) -> None:
        _, peers = _expand(EnvironmentKeyMacro(), "@EnvironmentValue var count: Int = 0", context)
        assert "static let defaultValue: Int = 0" in peers[0]

    def test_let_yields_two_invalid_property_type_diagnostics(
        self, context: MacroExpansionContext
    ) -> None:
        accessors, peers = _expand(EnvironmentKeyMacro(), "@EnvironmentValue let x = 5", context)
        assert accessors == []
        assert peers == []
        assert [d.message for d in context.diagnostics] == [InvalidPropertyType().message] * 2
        assert all(d.severity is Severity.ERROR for d in context.diagnostics)

    def test_missing_initializer_fails_only_the_peer(self, context: MacroExpansionContext) -> None:
        accessors, peers = _expand(EnvironmentKeyMacro(), "@EnvironmentValue var skeletonLoading", context)
        assert len(accessors) == 2
        assert peers == []
        assert [d.id for d in context.diagnostics] == ["elementary.missing_default_value"]
        assert context.diagnostics[0].message == MissingDefaultValue().message

    def test_type_without_value_fails_only_the_peer(self, context: MacroExpansionContext) -> None:
        accessors, peers = _expand(EnvironmentKeyMacro(), "@EnvironmentValue var loading: Bool", context)
        assert len(accessors) == 2
        assert peers == []
        assert len(context.diagnostics) == 1

    def test_diagnostic_is_located_at_the_attribute(self) -> None:
        source = "\n  @EnvironmentValue let x = 5"
        context = MacroExpansionContext(ExpansionConfig(), LineIndex(source))
        decl = parse_declaration(source[1:], offset=1)
        EnvironmentKeyMacro().provide_peers(decl.attributes[0], decl, context)
        location = context.diagnostics[0].location
        assert (location.line, location.column) == (2, 3)
        assert context.diagnostics[0].macro == "EnvironmentValue"

    def test_key_access_level_is_configurable(self) -> None:
        context = MacroExpansionContext(ExpansionConfig(key_access_level="private"))
        _, peers = _expand(EnvironmentKeyMacro(), "@EnvironmentValue var a = 1", context)
        assert peers[0].startswith("private struct EnvironmentKey_a: EnvironmentKey {")


# ---------------------------------------------------------------------------
# @FocusValue
# ---------------------------------------------------------------------------


class TestFocusedValueMacro:
    def test_peer_key_uses_wrapped_type(self, context: MacroExpansionContext) -> None:
        _, peers = _expand(FocusedValueMacro(), "@FocusValue var signInFocus: String?", context)
        assert peers == [
            "fileprivate struct FocusedValueKey_signInFocus: FocusedValueKey {\n"
            "    typealias Value = String\n"
            "}"
        ]

    def test_generic_optional(self, context: MacroExpansionContext) -> None:
        _, peers = _expand(FocusedValueMacro(), "@FocusValue var binding: Binding<Bool>?", context)
        assert "typealias Value = Binding<Bool>" in peers[0]

    def test_missing_type_annotation(self, context: MacroExpansionContext) -> None:
        _, peers = _expand(FocusedValueMacro(), "@FocusValue var focus = nil", context)
        assert peers == []
        assert context.diagnostics[0].message == MissingTypeAnnotation().message

    def test_non_optional_type_has_fix_it(self, context: MacroExpansionContext) -> None:
        text = "@FocusValue var isFocused: Bool"
        _, peers = _expand(FocusedValueMacro(), text, context)
        assert peers == []

        (diagnostic,) = context.diagnostics
        assert diagnostic.message == "Property type must be optional"
        assert diagnostic.id == "elementary.invalid_optional_type_annotation"

        (fix,) = diagnostic.fix_its
        assert fix.message == "Add '?' to the type to make it optional"
        assert fix.id == "elementary.invalid_optional_type_annotation"
        (edit,) = fix.edits
        assert text[edit.span.start : edit.span.end] == "Bool"
        assert edit.replacement == "Bool?"

    def test_accessors_do_not_need_optional(self, context: MacroExpansionContext) -> None:
        accessors, _ = _expand(FocusedValueMacro(), "@FocusValue var isFocused: Bool", context)
        assert len(accessors) == 2


class TestOptionalType:
    def test_simple(self) -> None:
        assert optional_type("Bool") == "Bool?"

    def test_function_type_is_parenthesized(self) -> None:
        assert optional_type("() -> Void") == "(() -> Void)?"

    def test_composition_is_parenthesized(self) -> None:
        assert optional_type("A & B") == "(A & B)?"

    def test_existential_is_parenthesized(self) -> None:
        assert optional_type("any View") == "(any View)?"
