"""Expand every registered macro in a Swift source file."""

from __future__ import annotations

import logging
import textwrap
from dataclasses import dataclass, field

from elementary.config import ExpansionConfig
from elementary.expansion.registry import MacroRegistry, create_default_registry
from elementary.macros.base import (
    AccessorMacro,
    ExtensionMacro,
    MacroExpansionContext,
    PeerMacro,
    with_error_handling,
)
from elementary.model.diagnostic import Diagnostic, Severity
from elementary.model.source import LineIndex, SourceSpan, TextEdit, apply_edits, overlaps
from elementary.model.syntax import Attribute, Declaration, VariableDecl
from elementary.parser import (
    AttachedSite,
    FreestandingSite,
    ParseError,
    parse_declaration,
    parse_freestanding,
    scan_source,
)

logger = logging.getLogger("elementary")

PARSE_ERROR_ID = "elementary.parse_error"


@dataclass
class ExpansionResult:
    """Expanded source plus the diagnostics produced along the way."""

    source: str
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnostics)


def _diagnose_parse_error(
    context: MacroExpansionContext, offset: int, error: ParseError, macro: str | None = None
) -> None:
    logger.debug("Parse error at offset %d: %s", offset, error.summary)
    context.diagnostics.append(
        Diagnostic(
            id=PARSE_ERROR_ID,
            severity=Severity.ERROR,
            message=error.summary,
            location=context.location(offset),
            macro=macro,
        )
    )


def _attribute_removal(source: str, span: SourceSpan) -> TextEdit:
    """Remove an attribute, or its whole line if nothing else is on it."""
    line_start = source.rfind("\n", 0, span.start) + 1
    line_end = source.find("\n", span.end)
    if line_end == -1:
        line_end = len(source)

    if not source[line_start : span.start].strip() and not source[span.end : line_end].strip():
        end = min(line_end + 1, len(source))
        return TextEdit.remove(SourceSpan(line_start, end))

    end = span.end
    while end < len(source) and source[end] in " \t":
        end += 1
    return TextEdit.remove(SourceSpan(span.start, end))


def _extended_type(site: AttachedSite, declaration: Declaration) -> str:
    if declaration.type_name is None:
        return ""
    return ".".join([*site.scope, declaration.type_name])


class _Expander:
    def __init__(self, source: str, registry: MacroRegistry, config: ExpansionConfig):
        self.source = source
        self.registry = registry
        self.config = config
        self.context = MacroExpansionContext(config, LineIndex(source))

    # ---- generated code ----

    def expand_generated(self, text: str) -> str:
        """Expand freestanding macros inside generated *text*.

        Diagnostics go to a throwaway context; the same macros are
        diagnosed where they appear in the original source.
        """
        if not self.config.expand_generated:
            return text
        scratch = MacroExpansionContext(self.config)
        scan = scan_source(text, frozenset(), self.registry.freestanding_names)
        edits = []
        for site in scan.freestanding:
            edit = self._freestanding_edit(text, site, scratch)
            if edit is not None:
                edits.append(edit)
        return apply_edits(text, edits) if edits else text

    # ---- freestanding ----

    def _freestanding_edit(
        self, source: str, site: FreestandingSite, context: MacroExpansionContext
    ) -> TextEdit | None:
        macro = self.registry.freestanding(site.name)
        if macro is None:
            return None
        try:
            node = parse_freestanding(source[site.start : site.end], offset=site.start)
        except ParseError as e:
            _diagnose_parse_error(context, site.start, e, macro=site.name)
            return None

        logger.debug("#%s at offset %d", site.name, site.start)
        expansion = with_error_handling(
            context, node, lambda: macro.expand_expression(node, context), on_failure=None
        )
        if expansion is None:
            return None
        return TextEdit(site.span, expansion)

    # ---- attached ----

    def _attached_edits(self, site: AttachedSite) -> list[TextEdit]:
        try:
            declaration = parse_declaration(
                self.source[site.start : site.header_end], offset=site.start
            )
        except ParseError as e:
            _diagnose_parse_error(self.context, site.start, e)
            return []

        macros: list[tuple[Attribute, object]] = []
        for attribute in declaration.attributes:
            macro = self.registry.attached(attribute.name)
            if macro is not None:
                macros.append((attribute, macro))
        logger.debug(
            "Declaration at offset %d: %s",
            site.start,
            ", ".join(f"@{attribute.name}" for attribute, _ in macros),
        )

        edits = [_attribute_removal(self.source, attribute.span) for attribute, _ in macros]  # type: ignore[arg-type]
        edits.extend(self._accessor_edits(site, declaration, macros))

        for attribute, macro in macros:
            if not isinstance(macro, PeerMacro):
                continue
            for peer in macro.provide_peers(attribute, declaration, self.context):
                peer = textwrap.indent(self.expand_generated(peer), site.indent)
                edits.append(TextEdit.insert(site.end, f"\n\n{peer}"))

        extended_type = _extended_type(site, declaration)
        for attribute, macro in macros:
            if not isinstance(macro, ExtensionMacro):
                continue
            for extension in macro.provide_extensions(
                attribute, declaration, extended_type, self.context
            ):
                extension = self.expand_generated(extension)
                edits.append(TextEdit.insert(site.top_level_end, f"\n\n{extension}"))

        return edits

    def _accessor_edits(
        self,
        site: AttachedSite,
        declaration: Declaration,
        macros: list[tuple[Attribute, object]],
    ) -> list[TextEdit]:
        accessors: list[str] = []
        providers: list[tuple[Attribute, AccessorMacro]] = []
        for attribute, macro in macros:
            if not isinstance(macro, AccessorMacro):
                continue
            provided = macro.provide_accessors(attribute, declaration, self.context)
            if provided:
                accessors.extend(provided)
                providers.append((attribute, macro))
        if not accessors or not isinstance(declaration, VariableDecl):
            return []

        edits: list[TextEdit] = []
        binding = declaration.bindings[0]
        # A computed property must spell out its type.
        annotation = ""
        if binding.type_annotation is None:
            attribute, macro = providers[0]
            annotation = f": {macro.property_type(attribute, declaration)}"

        # The property becomes computed, so its stored initializer goes.
        clause = binding.initializer_clause_span
        if clause is not None:
            edits.append(TextEdit(clause, annotation))
        elif annotation and binding.pattern_span is not None:
            edits.append(TextEdit.insert(binding.pattern_span.end, annotation))
        body = textwrap.indent("\n".join(accessors), site.indent + "    ")
        edits.append(TextEdit.insert(site.end, f" {{\n{body}\n{site.indent}}}"))
        return edits

    # ---- driver ----

    def run(self) -> ExpansionResult:
        scan = scan_source(
            self.source, self.registry.attached_names, self.registry.freestanding_names
        )

        edits: list[TextEdit] = []
        for site in scan.attached:
            edits.extend(self._attached_edits(site))

        for site in scan.freestanding:
            edit = self._freestanding_edit(self.source, site, self.context)
            if edit is None:
                continue
            if any(overlaps(edit, other) for other in edits):
                logger.debug("#%s at offset %d lies in rewritten code", site.name, site.start)
                continue
            edits.append(edit)

        diagnostics = sorted(
            self.context.diagnostics,
            key=lambda d: d.location.offset if d.location else 0,
        )
        logger.info(
            "Expanded %d attached and %d freestanding site(s): %d diagnostic(s)",
            len(scan.attached),
            len(scan.freestanding),
            len(diagnostics),
        )
        return ExpansionResult(apply_edits(self.source, edits), diagnostics)


def expand_source(
    source: str,
    registry: MacroRegistry | None = None,
    config: ExpansionConfig | None = None,
) -> ExpansionResult:
    """Expand every registered macro in *source*.

    Macro errors never propagate: each becomes a diagnostic and the
    affected site is left as far unexpanded as its failing phase requires.
    """
    expander = _Expander(source, registry or create_default_registry(), config or ExpansionConfig())
    return expander.run()
