"""Source positions and text edits."""

from __future__ import annotations

import bisect
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceSpan:
    """Half-open character range ``[start, end)`` into a source string."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span: {self.start}..{self.end}")

    def text(self, source: str) -> str:
        return source[self.start : self.end]


@dataclass(frozen=True)
class SourceLocation:
    """A 1-based line/column position, plus the absolute offset."""

    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class LineIndex:
    """Maps character offsets of a source string to line/column locations."""

    def __init__(self, source: str) -> None:
        self._line_starts = [0]
        for i, char in enumerate(source):
            if char == "\n":
                self._line_starts.append(i + 1)

    def location(self, offset: int) -> SourceLocation:
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return SourceLocation(
            offset=offset,
            line=line + 1,
            column=offset - self._line_starts[line] + 1,
        )


@dataclass(frozen=True)
class TextEdit:
    """Replace the text covered by *span* with *replacement*."""

    span: SourceSpan
    replacement: str

    @classmethod
    def insert(cls, offset: int, text: str) -> TextEdit:
        return cls(SourceSpan(offset, offset), text)

    @classmethod
    def remove(cls, span: SourceSpan) -> TextEdit:
        return cls(span, "")


def overlaps(a: TextEdit, b: TextEdit) -> bool:
    """Return True if two edits touch the same characters.

    Insertions at the boundary of a replacement do not overlap it.
    """
    if a.span.start == a.span.end or b.span.start == b.span.end:
        return a.span.start < b.span.start < a.span.end or b.span.start < a.span.start < b.span.end
    return a.span.start < b.span.end and b.span.start < a.span.end


def apply_edits(source: str, edits: list[TextEdit]) -> str:
    """Apply non-overlapping *edits* to *source*.

    Edits are applied in offset order; insertions sharing an offset keep
    the order in which they were given.

    Raises:
        ValueError: if two edits overlap.
    """
    ordered = sorted(edits, key=lambda e: e.span.start)
    parts: list[str] = []
    cursor = 0
    for edit in ordered:
        if edit.span.start < cursor:
            raise ValueError(
                f"Overlapping edit at {edit.span.start}..{edit.span.end} (cursor={cursor})"
            )
        parts.append(source[cursor : edit.span.start])
        parts.append(edit.replacement)
        cursor = edit.span.end
    parts.append(source[cursor:])
    return "".join(parts)
