"""Source templates for the declarations ``@Stylable`` generates."""

from __future__ import annotations

import textwrap
from string import Template

from elementary.config import StyleComposition

_STYLE_PROTOCOL = Template(
    """\
${access}protocol ${style_protocol}: ViewStyle where Configuration == ${configurations} {
    typealias Configuration = ${configurations}
}"""
)

_MODIFIER = Template(
    """\
internal struct StyleViewModifier<Style: ${style_protocol}>: ViewModifier {
    @Environment(\\.${environment_key}) private var currentStyle
    private let style: Style
    private var newStyle: any ${style_protocol} {
        return AggregatedStyle(currentStyle: currentStyle, style: style)
    }

    internal init(style: Style) {
        self.style = style
    }

    internal func body(content: Content) -> some View {
        content
            .environment(\\.${environment_key}, newStyle)
    }
}"""
)

_AGGREGATED_STYLE = Template(
    """\
fileprivate struct AggregatedStyle<Style: ${style_protocol}>: ${style_protocol} {
    private let currentStyle: any ${style_protocol}
    private let style: Style

    fileprivate init(currentStyle: any ${style_protocol}, style: Style) {
        self.currentStyle = currentStyle
        self.style = style
    }

    fileprivate func makeBody(content: Content, configuration: Style.Configuration) -> some View {
        let newContent = ${inner}.makeBody(
            content: content,
            configuration: configuration
        )

        VStack {
            AnyView(${outer}.makeBody(
                content: AnyView(newContent),
                configuration: configuration)
            )
        }
    }
}"""
)


class DeclarationsFactory:
    """Builds the style protocol, view modifier and aggregated style."""

    def __init__(
        self,
        style_protocol: str,
        composition: StyleComposition = StyleComposition.STYLE_INNERMOST,
    ):
        self.style_protocol = style_protocol
        self.composition = composition

    def style_protocol_declaration(self, configurations: str, access_modifier: str | None) -> str:
        return _STYLE_PROTOCOL.substitute(
            access=access_modifier or "",
            style_protocol=self.style_protocol,
            configurations=configurations,
        )

    def modifier(self, type_name: str, environment_key: str) -> str:
        declaration = _MODIFIER.substitute(
            style_protocol=self.style_protocol,
            environment_key=environment_key,
        )
        return self._with_extension(type_name, declaration)

    def aggregated_style(self, type_name: str) -> str:
        if self.composition is StyleComposition.STYLE_INNERMOST:
            inner, outer = "style", "currentStyle"
        else:
            inner, outer = "currentStyle", "style"
        declaration = _AGGREGATED_STYLE.substitute(
            style_protocol=self.style_protocol,
            inner=inner,
            outer=outer,
        )
        return self._with_extension(type_name, declaration)

    @staticmethod
    def _with_extension(type_name: str, declaration: str) -> str:
        return f"extension {type_name} {{\n{textwrap.indent(declaration, '    ')}\n}}"
