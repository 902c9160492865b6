"""Macro error taxonomy: errors that become diagnostics at the macro site.

Subclasses provide a ``code`` and a ``message``::

    class SomeMacroError(MacroError):
        code = "some_error"

        @property
        def message(self) -> str:
            return "Some error message..."
"""

from __future__ import annotations

from elementary.model.diagnostic import FixIt, Severity
from elementary.model.source import TextEdit

DOMAIN = "elementary"


class MacroError(Exception):
    """Base class for errors raised while expanding a macro."""

    code = "macro_error"

    @property
    def message(self) -> str:
        raise NotImplementedError

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def fix_its(self) -> list[FixIt]:
        return []

    @property
    def diagnostic_id(self) -> str:
        return f"{DOMAIN}.{self.code}"

    def with_fix_its(self, fix_its: list[FixIt]) -> MacroErrorFixItWrapper:
        """Return a copy of this error carrying the additional *fix_its*."""
        return MacroErrorFixItWrapper(self, fix_its)

    def with_fix_it(self, fix_it: FixIt) -> MacroErrorFixItWrapper:
        return self.with_fix_its([fix_it])

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class MacroErrorFixItWrapper(MacroError):
    """Decorates a MacroError with extra fix-its.

    Message, severity and id are those of the wrapped error; fix-its are
    the wrapped error's followed by the added ones.
    """

    def __init__(self, error: MacroError, fix_its: list[FixIt]):
        self.error = error
        self._fix_its = list(fix_its)
        super().__init__(error, tuple(self._fix_its))

    @property
    def code(self) -> str:  # type: ignore[override]
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def severity(self) -> Severity:
        return self.error.severity

    @property
    def fix_its(self) -> list[FixIt]:
        return self.error.fix_its + self._fix_its

    @property
    def diagnostic_id(self) -> str:
        return self.error.diagnostic_id


def fix_it(message: str, id: str, edits: list[TextEdit]) -> FixIt:
    """Build a FixIt whose id is namespaced under the macro domain."""
    return FixIt(message=message, id=f"{DOMAIN}.{id}", edits=list(edits))
