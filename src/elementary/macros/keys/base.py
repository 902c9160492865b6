"""Shared behaviour of macros that back a property with a generated key type.

``@EnvironmentValue var navigationTitle = "Title"`` inside an
``EnvironmentValues`` extension becomes a computed property reading and
writing ``self[EnvironmentKey_navigationTitle.self]``, plus the key struct
as a peer declaration.
"""

from __future__ import annotations

from elementary.macros.base import MacroExpansionContext, with_error_handling
from elementary.macros.keys.errors import InvalidPropertyDeclaration, InvalidPropertyType
from elementary.model.syntax import Attribute, Declaration, PropertyBinding, VariableDecl


class KeyMacro:
    """Accessor role shared by the key macros; subclasses add the peer role."""

    key_protocol_name = ""

    def binding(self, declaration: Declaration) -> PropertyBinding:
        """Return the single binding of a ``var`` declaration.

        Raises:
            InvalidPropertyType: if the declaration is not a ``var``.
            InvalidPropertyDeclaration: if it declares more than one binding.
        """
        if not isinstance(declaration, VariableDecl) or declaration.binding_specifier != "var":
            raise InvalidPropertyType()
        if len(declaration.bindings) != 1:
            raise InvalidPropertyDeclaration()
        return declaration.bindings[0]

    def key_name(self, binding: PropertyBinding) -> str:
        """``<KeyProtocol>_<property>``, e.g. ``EnvironmentKey_title``."""
        if binding.identifier is None:
            raise InvalidPropertyDeclaration()
        return f"{self.key_protocol_name}_{binding.identifier}"

    def key_declaration(self, context: MacroExpansionContext, key_name: str, body: str) -> str:
        access = context.config.key_access_level
        prefix = f"{access} " if access else ""
        return f"{prefix}struct {key_name}: {self.key_protocol_name} {{\n    {body}\n}}"

    def property_type(self, node: Attribute, declaration: Declaration) -> str:
        """The key's ``Value``, e.g. ``EnvironmentKey_title.Value``.

        Only meaningful once ``provide_accessors`` has succeeded.
        """
        return f"{self.key_name(self.binding(declaration))}.Value"

    def provide_accessors(
        self, node: Attribute, declaration: Declaration, context: MacroExpansionContext
    ) -> list[str]:
        def expansion() -> list[str]:
            key_name = self.key_name(self.binding(declaration))
            return [
                f"get {{\n    return self[{key_name}.self]\n}}",
                f"set(newValue) {{\n    self[{key_name}.self] = newValue\n}}",
            ]

        return with_error_handling(context, node, expansion, on_failure=[])
