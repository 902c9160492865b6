from __future__ import annotations

from elementary.macros.base import MacroExpansionContext, with_error_handling
from elementary.macros.keys.base import KeyMacro
from elementary.macros.keys.errors import MissingDefaultValue
from elementary.model.syntax import Attribute, Declaration


class EnvironmentKeyMacro(KeyMacro):
    """``@EnvironmentValue``: backs a property with a generated ``EnvironmentKey``.

    The property's initializer becomes the key's ``defaultValue``.
    """

    key_protocol_name = "EnvironmentKey"

    def provide_peers(
        self, node: Attribute, declaration: Declaration, context: MacroExpansionContext
    ) -> list[str]:
        def expansion() -> list[str]:
            binding = self.binding(declaration)
            key_name = self.key_name(binding)
            if binding.initializer is None:
                raise MissingDefaultValue()

            annotation = f": {binding.type_annotation}" if binding.type_annotation else ""
            body = f"static let defaultValue{annotation} = {binding.initializer}"
            return [self.key_declaration(context, key_name, body)]

        return with_error_handling(context, node, expansion, on_failure=[])
