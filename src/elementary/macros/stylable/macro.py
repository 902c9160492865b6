from __future__ import annotations

from elementary.macros.base import MacroExpansionContext, with_error_handling
from elementary.macros.stylable.arguments import Argument, ArgumentFactory, lower_camel
from elementary.macros.stylable.declarations import DeclarationsFactory
from elementary.macros.stylable.errors import (
    InvalidAccessModifier,
    InvalidTypeDeclaration,
    MissingViewConformance,
)
from elementary.model.syntax import AccessLevel, Attribute, Declaration


class StylableMacro:
    """``@Stylable``: style protocol, style modifier and style aggregation for a view.

    ::

        @Stylable
        public struct ContentView: View { ... }

    generates ``public protocol ContentViewStyle: ViewStyle`` as a peer, and
    two extensions of ``ContentView``: a ``StyleViewModifier`` that merges
    a new style into the one found under ``\\.contentViewStyle`` in the
    environment, and the ``AggregatedStyle`` doing the merge.

    Arguments (all optional): ``styleProtocol:``/``style:``,
    ``configurations:``, ``environmentKey:``, ``accessLevel:``.
    """

    def _view_name(self, declaration: Declaration) -> str:
        name = declaration.type_name
        if name is None:
            raise InvalidTypeDeclaration()
        return name

    def _verify_conformance(
        self,
        declaration: Declaration,
        view_name: str,
        node: Attribute,
        context: MacroExpansionContext,
    ) -> None:
        if "View" not in declaration.inherited_types:
            context.diagnose(node, MissingViewConformance(view_name))

    def _style_protocol(self, factory: ArgumentFactory, view_name: str) -> str:
        return factory.argument(Argument.STYLE_PROTOCOL, f"{view_name}Style")  # type: ignore[return-value]

    def provide_peers(
        self, node: Attribute, declaration: Declaration, context: MacroExpansionContext
    ) -> list[str]:
        def expansion() -> list[str]:
            view_name = self._view_name(declaration)
            self._verify_conformance(declaration, view_name, node, context)

            factory = ArgumentFactory(node.arguments)
            style_protocol = self._style_protocol(factory, view_name)
            configurations = factory.argument(
                Argument.CONFIGURATIONS, f"{style_protocol}Configuration"
            )
            raw_access = factory.argument(Argument.ACCESS_LEVEL)
            if raw_access is not None:
                access_level = AccessLevel.parse(raw_access)
                if access_level is None:
                    raise InvalidAccessModifier(raw_access)
            else:
                access_level = declaration.access_level

            declarations = DeclarationsFactory(style_protocol, context.config.style_composition)
            return [
                declarations.style_protocol_declaration(
                    configurations,  # type: ignore[arg-type]
                    access_level.modifier if access_level else None,
                )
            ]

        return with_error_handling(context, node, expansion, on_failure=[])

    def provide_extensions(
        self,
        node: Attribute,
        declaration: Declaration,
        extended_type: str,
        context: MacroExpansionContext,
    ) -> list[str]:
        def expansion() -> list[str]:
            view_name = self._view_name(declaration)
            self._verify_conformance(declaration, view_name, node, context)

            factory = ArgumentFactory(node.arguments)
            style_protocol = self._style_protocol(factory, view_name)
            environment_key = factory.argument(
                Argument.ENVIRONMENT_KEY, lower_camel(style_protocol)
            )

            declarations = DeclarationsFactory(style_protocol, context.config.style_composition)
            return [
                declarations.modifier(extended_type, environment_key),  # type: ignore[arg-type]
                declarations.aggregated_style(extended_type),
            ]

        return with_error_handling(context, node, expansion, on_failure=[])
