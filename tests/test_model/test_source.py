"""Tests for source spans, locations and text edits."""

import pytest

from elementary.model import (
    AccessLevel,
    Diagnostic,
    FixIt,
    LineIndex,
    MacroArgument,
    Severity,
    SourceLocation,
    SourceSpan,
    TextEdit,
    apply_edits,
)
from elementary.model.source import overlaps


class TestSourceSpan:
    def test_invalid_span(self) -> None:
        with pytest.raises(ValueError):
            SourceSpan(5, 2)

    def test_text(self) -> None:
        assert SourceSpan(1, 3).text("abcdef") == "bc"


class TestLineIndex:
    def test_locations(self) -> None:
        index = LineIndex("ab\ncd\n\nef")
        assert index.location(0) == SourceLocation(0, 1, 1)
        assert index.location(4) == SourceLocation(4, 2, 2)
        assert index.location(7) == SourceLocation(7, 4, 1)

    def test_str(self) -> None:
        assert str(SourceLocation(10, 3, 7)) == "3:7"


class TestApplyEdits:
    def test_edits_in_any_order(self) -> None:
        edits = [TextEdit(SourceSpan(4, 5), "E"), TextEdit(SourceSpan(0, 1), "A")]
        assert apply_edits("abcde", edits) == "AbcdE"

    def test_insertions_at_same_offset_keep_order(self) -> None:
        edits = [TextEdit.insert(1, "1"), TextEdit.insert(1, "2")]
        assert apply_edits("ab", edits) == "a12b"

    def test_removal_then_insertion_at_its_end(self) -> None:
        edits = [TextEdit.remove(SourceSpan(1, 3)), TextEdit.insert(3, "X")]
        assert apply_edits("abcd", edits) == "aXd"

    def test_overlap_raises(self) -> None:
        with pytest.raises(ValueError):
            apply_edits("abcd", [TextEdit(SourceSpan(0, 2), ""), TextEdit(SourceSpan(1, 3), "")])


class TestOverlaps:
    def test_disjoint(self) -> None:
        assert not overlaps(TextEdit(SourceSpan(0, 2), ""), TextEdit(SourceSpan(2, 4), ""))

    def test_intersecting(self) -> None:
        assert overlaps(TextEdit(SourceSpan(0, 3), ""), TextEdit(SourceSpan(2, 4), ""))

    def test_insertion_at_boundary(self) -> None:
        assert not overlaps(TextEdit.insert(2, "x"), TextEdit(SourceSpan(0, 2), ""))

    def test_insertion_inside(self) -> None:
        assert overlaps(TextEdit.insert(1, "x"), TextEdit(SourceSpan(0, 2), ""))


class TestAccessLevel:
    @pytest.mark.parametrize("raw", ["public", ".public", " public "])
    def test_parse(self, raw: str) -> None:
        assert AccessLevel.parse(raw) is AccessLevel.PUBLIC

    def test_parse_invalid(self) -> None:
        assert AccessLevel.parse("bogus") is None

    def test_modifier(self) -> None:
        assert AccessLevel.FILEPRIVATE.modifier == "fileprivate "


class TestMacroArgument:
    def test_string_literal(self) -> None:
        assert MacroArgument(None, '"abc"').string_literal == "abc"
        assert MacroArgument(None, "abc").string_literal is None

    def test_value_forms(self) -> None:
        assert MacroArgument(None, '"MyStyle"').value == "MyStyle"
        assert MacroArgument(None, "MyConfig.self").value == "MyConfig"
        assert MacroArgument(None, ".private").value == "private"


class TestDiagnostic:
    def test_str(self) -> None:
        diagnostic = Diagnostic(
            id="elementary.x",
            severity=Severity.WARNING,
            message="careful",
            location=SourceLocation(0, 2, 4),
        )
        assert str(diagnostic) == "2:4: warning: careful"
        assert diagnostic.is_warning and not diagnostic.is_error

    def test_str_without_location(self) -> None:
        diagnostic = Diagnostic(id="elementary.x", severity=Severity.NOTE, message="fyi")
        assert str(diagnostic) == "note: fyi"

    def test_to_dict(self) -> None:
        fix = FixIt("Add it", "elementary.add", [TextEdit(SourceSpan(1, 2), "?")])
        diagnostic = Diagnostic(
            id="elementary.x", severity=Severity.ERROR, message="m", macro="FocusValue", fix_its=[fix]
        )
        assert diagnostic.to_dict() == {
            "id": "elementary.x",
            "severity": "error",
            "message": "m",
            "line": None,
            "column": None,
            "macro": "FocusValue",
            "fix_its": [
                {
                    "message": "Add it",
                    "id": "elementary.add",
                    "edits": [{"start": 1, "end": 2, "replacement": "?"}],
                }
            ],
        }
