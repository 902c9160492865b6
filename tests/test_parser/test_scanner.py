"""Tests for the macro site scanner."""

from elementary.parser import scan_source

ATTACHED = frozenset({"EnvironmentValue", "FocusValue", "Stylable"})
FREESTANDING = frozenset({"color", "unsafeColor"})


def _scan(source: str):  # type: ignore[no-untyped-def]
    return scan_source(source, ATTACHED, FREESTANDING)


# ---------------------------------------------------------------------------
# Attached sites
# ---------------------------------------------------------------------------


class TestPropertySites:
    def test_single_line_property(self) -> None:
        source = 'extension EnvironmentValues {\n    @EnvironmentValue var title = "Title"\n}\n'
        (site,) = _scan(source).attached
        assert source[site.start : site.end] == '@EnvironmentValue var title = "Title"'
        assert site.header_end == site.end
        assert site.indent == "    "
        assert site.scope == ("EnvironmentValues",)
        assert source[: site.top_level_end].endswith("}")
        assert site.top_level_end == len(source) - 1

    def test_continued_initializer(self) -> None:
        source = "@EnvironmentValue var title =\n    \"Title\"\nlet other = 1\n"
        (site,) = _scan(source).attached
        assert source[site.start : site.end] == '@EnvironmentValue var title =\n    "Title"'

    def test_leading_dot_continues(self) -> None:
        source = "@EnvironmentValue var tint = Color.red\n    .opacity(0.5)\nlet other = 1\n"
        (site,) = _scan(source).attached
        assert source[site.start : site.end].endswith(".opacity(0.5)")

    def test_multiline_brackets(self) -> None:
        source = "@EnvironmentValue var items = [\n    1,\n    2\n]\nlet other = 1\n"
        (site,) = _scan(source).attached
        assert source[site.start : site.end].endswith("2\n]")

    def test_semicolon_ends_statement(self) -> None:
        source = "@EnvironmentValue var a = 1; let b = 2"
        (site,) = _scan(source).attached
        assert source[site.start : site.end] == "@EnvironmentValue var a = 1"

    def test_trailing_comment_is_excluded(self) -> None:
        source = "@EnvironmentValue var a = 1 // note\n"
        (site,) = _scan(source).attached
        assert source[site.start : site.end] == "@EnvironmentValue var a = 1"

    def test_attribute_on_its_own_line(self) -> None:
        source = "    @FocusValue\n    var focus: Bool?\n"
        (site,) = _scan(source).attached
        assert site.start == 4
        assert source[site.start : site.end] == "@FocusValue\n    var focus: Bool?"

    def test_site_starts_at_first_attribute_of_the_run(self) -> None:
        source = "@MainActor @EnvironmentValue public var a = 1\n"
        (site,) = _scan(source).attached
        assert site.start == 0


class TestTypeSites:
    SOURCE = (
        "struct List {\n"
        "    @Stylable\n"
        "    public struct Row: View {\n"
        "        var body: some View { Text(\"}\") }\n"
        "    }\n"
        "}\n"
    )

    def test_header_stops_before_body(self) -> None:
        (site,) = _scan(self.SOURCE).attached
        assert self.SOURCE[site.start : site.header_end] == "@Stylable\n    public struct Row: View"

    def test_end_is_past_the_body(self) -> None:
        (site,) = _scan(self.SOURCE).attached
        assert self.SOURCE[site.end - 1] == "}"
        assert self.SOURCE[site.end :] == "\n}\n"

    def test_scope_and_top_level_end(self) -> None:
        (site,) = _scan(self.SOURCE).attached
        assert site.scope == ("List",)
        assert site.top_level_end == len(self.SOURCE) - 1

    def test_top_level_type(self) -> None:
        source = "@Stylable struct V: View {\n}\nstruct Other {}\n"
        (site,) = _scan(source).attached
        assert site.scope == ()
        assert site.top_level_end == site.end
        assert source[site.start : site.end] == "@Stylable struct V: View {\n}"

    def test_generic_where_clause_header(self) -> None:
        source = "@Stylable struct Row<T>: View where T: Hashable {\n}\n"
        (site,) = _scan(source).attached
        assert source[site.start : site.header_end].endswith("where T: Hashable")

    def test_nested_scopes(self) -> None:
        source = (
            "enum A {\n"
            "    struct B {\n"
            "        func f() {}\n"
            "        @Stylable struct C: View {}\n"
            "    }\n"
            "}\n"
        )
        (site,) = _scan(source).attached
        assert site.scope == ("A", "B")

    def test_class_members_do_not_open_scopes(self) -> None:
        source = (
            "class A {\n"
            "    class func make() {}\n"
            "    @Stylable struct V: View {}\n"
            "}\n"
        )
        (site,) = _scan(source).attached
        assert site.scope == ("A",)


class TestIgnoredText:
    def test_unregistered_attributes(self) -> None:
        result = _scan("@MainActor struct V {}\n@State var a = 1\n")
        assert result.attached == []

    def test_comments_and_strings(self) -> None:
        source = (
            "// @EnvironmentValue var a = 1\n"
            "/* #color(\"fff\") */\n"
            'let s = "@Stylable #color(\\"fff\\")"\n'
        )
        result = _scan(source)
        assert result.attached == []
        assert result.freestanding == []


# ---------------------------------------------------------------------------
# Freestanding sites
# ---------------------------------------------------------------------------


class TestFreestandingSites:
    def test_color(self) -> None:
        source = 'let c = #color("676C60")\n'
        (site,) = _scan(source).freestanding
        assert site.name == "color"
        assert site.span.text(source) == '#color("676C60")'

    def test_nested_in_call(self) -> None:
        source = 'Text("a").foregroundStyle(#unsafeColor(hex)).padding()'
        (site,) = _scan(source).freestanding
        assert site.span.text(source) == "#unsafeColor(hex)"

    def test_without_arguments(self) -> None:
        source = "let c = #color\n"
        (site,) = _scan(source).freestanding
        assert site.span.text(source) == "#color"

    def test_unregistered_pound_names(self) -> None:
        assert _scan("#if DEBUG\n#endif\nlet a = #file\n").freestanding == []

    def test_source_order(self) -> None:
        source = 'let a = #color("000000")\nlet b = #unsafeColor(x)\n'
        assert [s.name for s in _scan(source).freestanding] == ["color", "unsafeColor"]

    def test_inside_attached_declaration(self) -> None:
        source = '@EnvironmentValue var tint = #color("ff0000")\n'
        result = _scan(source)
        assert len(result.attached) == 1
        assert len(result.freestanding) == 1
