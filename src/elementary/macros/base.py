"""Macro roles and the per-expansion context."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, TypeVar, runtime_checkable

from elementary.config import ExpansionConfig
from elementary.macros.error import MacroError
from elementary.model.diagnostic import Diagnostic
from elementary.model.source import LineIndex, SourceLocation
from elementary.model.syntax import Attribute, Declaration, FreestandingMacro

logger = logging.getLogger("elementary")

T = TypeVar("T")


class MacroExpansionContext:
    """Collects the diagnostics produced while expanding one source file."""

    def __init__(
        self,
        config: ExpansionConfig | None = None,
        line_index: LineIndex | None = None,
    ):
        self.config = config or ExpansionConfig()
        self._line_index = line_index
        self.diagnostics: list[Diagnostic] = []

    def location(self, offset: int) -> SourceLocation | None:
        if self._line_index is None:
            return None
        return self._line_index.location(offset)

    def diagnose(self, node: Attribute | FreestandingMacro, error: MacroError) -> None:
        """Record *error* as a diagnostic located at the macro *node*."""
        location = self.location(node.span.start) if node.span is not None else None
        logger.debug("%s: %s (%s)", node.name, error.message, error.diagnostic_id)
        self.diagnostics.append(
            Diagnostic(
                id=error.diagnostic_id,
                severity=error.severity,
                message=error.message,
                location=location,
                macro=node.name,
                fix_its=list(error.fix_its),
            )
        )


def with_error_handling(
    context: MacroExpansionContext,
    node: Attribute | FreestandingMacro,
    expansion: Callable[[], T],
    on_failure: T,
) -> T:
    """Run *expansion*; on MacroError diagnose it at *node* and return *on_failure*."""
    try:
        return expansion()
    except MacroError as error:
        context.diagnose(node, error)
        return on_failure


@runtime_checkable
class AccessorMacro(Protocol):
    """Generates accessors (``get``/``set``) for the attached property.

    A computed property needs an explicit type; ``property_type`` names one
    for properties that only had an inferred type.
    """

    def provide_accessors(
        self, node: Attribute, declaration: Declaration, context: MacroExpansionContext
    ) -> list[str]: ...

    def property_type(self, node: Attribute, declaration: Declaration) -> str: ...


@runtime_checkable
class PeerMacro(Protocol):
    """Generates declarations placed next to the attached declaration."""

    def provide_peers(
        self, node: Attribute, declaration: Declaration, context: MacroExpansionContext
    ) -> list[str]: ...


@runtime_checkable
class ExtensionMacro(Protocol):
    """Generates extensions of the attached type."""

    def provide_extensions(
        self,
        node: Attribute,
        declaration: Declaration,
        extended_type: str,
        context: MacroExpansionContext,
    ) -> list[str]: ...


@runtime_checkable
class ExpressionMacro(Protocol):
    """Replaces a freestanding ``#name(...)`` expression."""

    def expand_expression(
        self, node: FreestandingMacro, context: MacroExpansionContext
    ) -> str: ...
