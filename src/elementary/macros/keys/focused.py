from __future__ import annotations

from elementary.macros.base import MacroExpansionContext, with_error_handling
from elementary.macros.error import fix_it
from elementary.macros.keys.base import KeyMacro
from elementary.macros.keys.errors import (
    InvalidOptionalTypeAnnotation,
    MissingTypeAnnotation,
)
from elementary.model.diagnostic import FixIt
from elementary.model.source import TextEdit
from elementary.model.syntax import Attribute, Declaration, PropertyBinding

_OPTIONAL_FIX_IT_MESSAGE = "Add '?' to the type to make it optional"


def optional_type(type_text: str) -> str:
    """Spell *type_text* as an optional, parenthesizing where ``?`` would bind wrongly."""
    needs_parens = (
        "->" in type_text
        or "&" in type_text
        or type_text.startswith(("some ", "any "))
    )
    return f"({type_text})?" if needs_parens else f"{type_text}?"


class FocusedValueMacro(KeyMacro):
    """``@FocusValue``: backs an optional property with a ``FocusedValueKey``."""

    key_protocol_name = "FocusedValueKey"

    def _optional_fix_it(self, binding: PropertyBinding) -> FixIt:
        edits: list[TextEdit] = []
        if binding.type_span is not None and binding.type_annotation is not None:
            edits.append(TextEdit(binding.type_span, optional_type(binding.type_annotation)))
        return fix_it(_OPTIONAL_FIX_IT_MESSAGE, "invalid_optional_type_annotation", edits)

    def provide_peers(
        self, node: Attribute, declaration: Declaration, context: MacroExpansionContext
    ) -> list[str]:
        def expansion() -> list[str]:
            binding = self.binding(declaration)
            key_name = self.key_name(binding)
            if binding.type_annotation is None:
                raise MissingTypeAnnotation()
            wrapped = binding.wrapped_type
            if wrapped is None:
                raise InvalidOptionalTypeAnnotation().with_fix_it(self._optional_fix_it(binding))

            return [self.key_declaration(context, key_name, f"typealias Value = {wrapped}")]

        return with_error_handling(context, node, expansion, on_failure=[])
