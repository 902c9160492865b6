"""Diagnostic model: structured messages attached to macro sites."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from elementary.model.source import SourceLocation, TextEdit


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


@dataclass(frozen=True)
class FixIt:
    """A machine-applicable edit suggestion attached to a diagnostic.

    Attributes:
        message: Human-readable description of the change.
        id: Namespaced identifier of the fix-it.
        edits: The source edits that implement the suggestion.
    """

    message: str
    id: str
    edits: list[TextEdit] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "id": self.id,
            "edits": [
                {
                    "start": e.span.start,
                    "end": e.span.end,
                    "replacement": e.replacement,
                }
                for e in self.edits
            ],
        }


@dataclass(frozen=True)
class Diagnostic:
    """A single finding reported while expanding a macro.

    Attributes:
        id: Identifier of the error that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        location: Where the macro invocation starts, if known.
        macro: Name of the macro being expanded, if applicable.
        fix_its: Suggested source edits.
    """

    id: str
    severity: Severity
    message: str
    location: SourceLocation | None = None
    macro: str | None = None
    fix_its: list[FixIt] = field(default_factory=list)

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def is_note(self) -> bool:
        return self.severity is Severity.NOTE

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "severity": self.severity.value,
            "message": self.message,
            "line": self.location.line if self.location else None,
            "column": self.location.column if self.location else None,
            "macro": self.macro,
            "fix_its": [f.to_dict() for f in self.fix_its],
        }

    def __str__(self) -> str:
        prefix = f"{self.location}: " if self.location else ""
        return f"{prefix}{self.severity.value}: {self.message}"
