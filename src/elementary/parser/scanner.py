"""Hand-written scanner that locates macro sites in a Swift source file.

The scanner does not parse declarations. It tokenizes just enough to skip
strings and comments and to match brackets. From that it finds where each
declaration carrying a registered macro attribute begins and ends, and
where each registered freestanding macro expression sits.
"""

from __future__ import annotations

import re
from collections.abc import Collection
from dataclasses import dataclass, field

from elementary.model.source import SourceSpan

__all__ = ["AttachedSite", "FreestandingSite", "ScanResult", "scan_source"]

_TOKEN_RE = re.compile(
    r"(?P<comment>//[^\n]*|/\*[\s\S]*?\*/)"
    r'|(?P<string>#*"""[\s\S]*?"""#*|#*"(?:[^"\\\n]|\\.)*"#*)'
    r"|(?P<attribute>@[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<pound>#[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<ident>`[^`\n]+`|[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<open>[(\[{])"
    r"|(?P<close>[)\]}])"
    r"|(?P<newline>\n)"
    r"|(?P<space>[ \t\r\f]+)"
    r"|(?P<other>.)"
)

_INDENT_RE = re.compile(r"[ \t]*")

_TYPE_KEYWORDS = frozenset({"struct", "class", "enum", "actor", "protocol", "extension"})
_BODY_KEYWORDS = _TYPE_KEYWORDS | {"func", "init", "deinit", "subscript"}
_MODIFIERS = frozenset(
    {
        "public", "package", "internal", "private", "fileprivate", "open",
        "static", "final", "override", "nonisolated", "lazy", "weak",
        "unowned", "mutating", "nonmutating", "indirect", "convenience",
        "required", "dynamic", "optional",
    }
)
# Identifiers that can follow a type keyword without naming a type
# (``class func``, ``class var``).
_NOT_TYPE_NAMES = frozenset({"func", "var", "let", "subscript", "init"})

# A line ending with one of these continues the declaration on the next line.
_CONTINUATION_SUFFIXES = ("=", ",")


@dataclass(frozen=True)
class _Token:
    kind: str
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class AttachedSite:
    """A declaration whose attribute list holds at least one registered macro.

    Attributes:
        start: Offset of the first attribute of the declaration.
        end: Offset just past the declaration (past the body brace for
            types and functions).
        header_end: End of the text handed to the declaration parser; for
            declarations with a body this stops before the opening brace.
        indent: Leading whitespace of the line the declaration starts on.
        scope: Names of the enclosing type declarations, outermost first.
        top_level_end: End of the top-level declaration containing this one
            (``end`` itself for top-level declarations).
    """

    start: int
    end: int
    header_end: int
    indent: str
    scope: tuple[str, ...] = ()
    top_level_end: int = 0


@dataclass(frozen=True)
class FreestandingSite:
    """A ``#name(...)`` expression for a registered freestanding macro."""

    name: str
    start: int
    end: int

    @property
    def span(self) -> SourceSpan:
        return SourceSpan(self.start, self.end)


@dataclass
class ScanResult:
    attached: list[AttachedSite] = field(default_factory=list)
    freestanding: list[FreestandingSite] = field(default_factory=list)


def _tokenize(source: str) -> list[_Token]:
    tokens: list[_Token] = []
    for match in _TOKEN_RE.finditer(source):
        kind = match.lastgroup or "other"
        if kind in ("space", "comment"):
            continue
        tokens.append(_Token(kind, match.group(), match.start(), match.end()))
    return tokens


def _match_brackets(tokens: list[_Token]) -> dict[int, int]:
    """Map the index of every matched bracket to the index of its partner."""
    matching: dict[int, int] = {}
    stack: list[int] = []
    for i, token in enumerate(tokens):
        if token.kind == "open":
            stack.append(i)
        elif token.kind == "close" and stack:
            opener = stack.pop()
            matching[opener] = i
            matching[i] = opener
    return matching


class _Scanner:
    def __init__(self, source: str):
        self.source = source
        self.tokens = _tokenize(source)
        self.matching = _match_brackets(self.tokens)

    # ---- token helpers ----

    def _skip_newlines(self, i: int) -> int:
        while i < len(self.tokens) and self.tokens[i].kind == "newline":
            i += 1
        return i

    def _close_of(self, i: int) -> int:
        """Index of the bracket closing the one at *i* (last token if unmatched)."""
        return self.matching.get(i, len(self.tokens) - 1)

    def _indent(self, offset: int) -> str:
        line_start = self.source.rfind("\n", 0, offset) + 1
        return _INDENT_RE.match(self.source, line_start).group()  # type: ignore[union-attr]

    # ---- declaration extents ----

    def _attribute_run(self, i: int) -> tuple[list[str], int]:
        """Collect the attribute names starting at *i*; return them and the next index."""
        tokens = self.tokens
        names: list[str] = []
        while i < len(tokens) and tokens[i].kind == "attribute":
            name = tokens[i].text[1:]
            i += 1
            while (
                i + 1 < len(tokens)
                and tokens[i].text == "."
                and tokens[i + 1].kind == "ident"
                and tokens[i].start == tokens[i - 1].end
            ):
                name += "." + tokens[i + 1].text
                i += 2
            if i < len(tokens) and tokens[i].text == "(":
                i = self._close_of(i) + 1
            names.append(name)
            i = self._skip_newlines(i)
        return names, i

    def _keyword_index(self, i: int) -> int:
        """Skip declaration modifiers starting at *i*."""
        tokens = self.tokens
        while i < len(tokens) and tokens[i].kind == "ident" and tokens[i].text in _MODIFIERS:
            i += 1
            if i < len(tokens) and tokens[i].text == "(":
                i = self._close_of(i) + 1
            i = self._skip_newlines(i)
        return i

    def _body_brace(self, i: int) -> int | None:
        """Index of the ``{`` opening the body of the declaration at *i*."""
        tokens = self.tokens
        while i < len(tokens):
            token = tokens[i]
            if token.text == "{":
                return i
            if token.text in ("(", "["):
                i = self._close_of(i) + 1
                continue
            if token.kind == "close" or token.text == ";":
                return None
            i += 1
        return None

    def _statement_end(self, i: int) -> int:
        """Index of the last token of the statement starting at *i*.

        The statement ends at a newline or ``;`` outside brackets, unless
        the line ends in ``=`` or ``,`` or the next line starts with ``.``.
        """
        tokens = self.tokens
        last = i
        while i < len(tokens):
            token = tokens[i]
            if token.kind == "open":
                last = self._close_of(i)
                i = last + 1
                continue
            if token.kind == "close" or token.text == ";":
                break
            if token.kind == "newline":
                following = self._skip_newlines(i)
                continues = tokens[last].text in _CONTINUATION_SUFFIXES or (
                    following < len(tokens) and tokens[following].text == "."
                )
                if not continues:
                    break
                i = following
                continue
            last = i
            i += 1
        return min(last, len(tokens) - 1)

    def _extent(self, run_end: int, keyword_at: int) -> tuple[int, int]:
        """Return ``(header_end, end)`` offsets for the declaration at *keyword_at*."""
        tokens = self.tokens
        if keyword_at >= len(tokens):
            end = tokens[run_end - 1].end
            return end, end

        if tokens[keyword_at].text in _BODY_KEYWORDS:
            brace = self._body_brace(keyword_at)
            if brace is not None:
                header_last = brace - 1
                while tokens[header_last].kind == "newline":
                    header_last -= 1
                close = self.matching.get(brace)
                end = tokens[close].end if close is not None else len(self.source)
                return tokens[header_last].end, end

        last = self._statement_end(keyword_at)
        return tokens[last].end, tokens[last].end

    # ---- main loop ----

    def scan(self, attached: Collection[str], freestanding: Collection[str]) -> ScanResult:
        tokens = self.tokens
        result = ScanResult()
        # One entry per open brace: the type name it is the body of, or None.
        scopes: list[str | None] = []
        top_level_close: int | None = None
        pending_type: str | None = None

        i = 0
        while i < len(tokens):
            token = tokens[i]

            if token.kind == "attribute":
                names, run_end = self._attribute_run(i)
                if any(name in attached for name in names):
                    keyword_at = self._keyword_index(run_end)
                    header_end, end = self._extent(run_end, keyword_at)
                    if scopes and top_level_close is not None:
                        top_level_end = tokens[top_level_close].end
                    elif scopes:
                        top_level_end = len(self.source)
                    else:
                        top_level_end = end
                    result.attached.append(
                        AttachedSite(
                            start=token.start,
                            end=end,
                            header_end=header_end,
                            indent=self._indent(token.start),
                            scope=tuple(name for name in scopes if name is not None),
                            top_level_end=top_level_end,
                        )
                    )
                i = run_end
                continue

            if token.kind == "pound" and token.text[1:] in freestanding:
                end_index = i
                if i + 1 < len(tokens) and tokens[i + 1].text == "(":
                    end_index = self._close_of(i + 1)
                result.freestanding.append(
                    FreestandingSite(token.text[1:], token.start, tokens[end_index].end)
                )
                i = end_index + 1
                continue

            if token.kind == "ident" and token.text in _TYPE_KEYWORDS:
                name_at = self._skip_newlines(i + 1)
                if (
                    name_at < len(tokens)
                    and tokens[name_at].kind == "ident"
                    and tokens[name_at].text not in _NOT_TYPE_NAMES
                ):
                    pending_type = tokens[name_at].text
                    j = name_at + 1
                    while j + 1 < len(tokens) and tokens[j].text == "." and tokens[j + 1].kind == "ident":
                        pending_type += "." + tokens[j + 1].text
                        j += 2
                    i = j
                    continue

            if token.text == "{":
                if not scopes:
                    top_level_close = self.matching.get(i)
                scopes.append(pending_type)
                pending_type = None
            elif token.text == "}":
                if scopes:
                    scopes.pop()
                pending_type = None
            elif token.text == ";":
                pending_type = None

            i += 1

        return result


def scan_source(
    source: str,
    attached: Collection[str],
    freestanding: Collection[str],
) -> ScanResult:
    """Find the attached and freestanding macro sites in *source*.

    Args:
        source: Swift source text.
        attached: Names of attached macros (without ``@``).
        freestanding: Names of freestanding macros (without ``#``).

    Returns:
        A ScanResult with both kinds of sites in source order.
    """
    return _Scanner(source).scan(attached, freestanding)
