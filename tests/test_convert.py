"""End-to-end tests: markdown text in, HTML out."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from apexmd.config import ConversionOptions
from apexmd.convert import markdown_to_html

ROWSPAN_MD = """\
| Group | Item |
|-------|------|
| A     | one  |
| ^^    | two  |
"""

COLSPAN_MD = """\
| H1 | H2 | H3 |
|----|----|----|
| A  |    |    |
| x  | y  | z  |
"""

FOOTER_MD = """\
| Item | Cost |
|------|------|
| Tea  | 3    |
| ===  | ===  |
| Sum  | 3    |
"""


class TestTables:

    def test_rowspan(self):
        html = markdown_to_html(ROWSPAN_MD)
        assert '<td rowspan="2">A</td>' in html
        assert "^^" not in html

    def test_colspan(self):
        html = markdown_to_html(COLSPAN_MD)
        assert '<td colspan="3">A</td>' in html

    def test_footer(self):
        html = markdown_to_html(FOOTER_MD)
        assert "<tfoot>" in html
        assert "<td>Sum</td>" in html.split("<tfoot>")[1]
        assert "===" not in html

    def test_bracket_caption(self):
        html = markdown_to_html("[Prices]\n\n" + FOOTER_MD)
        assert '<figure class="table-figure">\n<figcaption>Prices</figcaption>\n<table>' in html
        assert "[Prices]" not in html

    def test_pandoc_caption(self):
        html = markdown_to_html(COLSPAN_MD + "\n: Letters\n")
        assert "<figcaption>Letters</figcaption>" in html
        assert ": Letters" not in html

    def test_trailing_caption_row(self):
        html = markdown_to_html(ROWSPAN_MD + "| [Grouped items] | |\n")
        assert "<figcaption>Grouped items</figcaption>" in html
        assert "[Grouped items]" not in html

    def test_text_after_table(self):
        html = markdown_to_html(ROWSPAN_MD + "\nText after.\n")
        assert "</table>\n<p>Text after.</p>\n" in html

    def test_one_cell_caption_row(self):
        html = markdown_to_html("| H1 | H2 |\n|----|----|\n| A  | B  |\n| [Cap] |\n")
        assert '<figure class="table-figure">\n<figcaption>Cap</figcaption>\n<table>' in html
        assert "[Cap]" not in html
        assert html.count("<tr>") == 2

    def test_short_row_spans_header_width(self):
        html = markdown_to_html("| H1 | H2 | H3 |\n|----|----|----|\n| A |\n")
        assert '<td colspan="3">A</td>' in html

    def test_typed_dash_separator_row(self):
        html = markdown_to_html("| H1 | H2 |\n|----|----|\n| A  | B  |\n| --- | --- |\n| ^^ | C  |\n")
        assert '<td rowspan="2">A</td>' in html
        assert "---" not in html
        assert html.count("<tr>") == 3


class TestNestedTables:

    def test_rowspan_in_block_quote(self):
        html = markdown_to_html("> | H1 | H2 |\n> |----|----|\n> | A | B |\n> | ^^ | C |\n")
        assert html.startswith("<blockquote>\n<table>\n")
        assert '<td rowspan="2">A</td>' in html
        assert "^^" not in html

    def test_caption_in_block_quote(self):
        html = markdown_to_html("> [Quoted]\n>\n> | H1 | H2 |\n> |----|----|\n> | A | B |\n")
        assert "<figcaption>Quoted</figcaption>" in html
        assert "[Quoted]" not in html

    def test_colspan_in_list_item(self):
        html = markdown_to_html("- item\n\n  | H1 | H2 |\n  |----|----|\n  | A |\n")
        assert '<td colspan="2">A</td>' in html


class TestOptions:

    def test_advanced_tables_off(self):
        html = markdown_to_html(ROWSPAN_MD, ConversionOptions(advanced_tables=False))
        assert "<td>^^</td>" in html
        assert "rowspan" not in html

    def test_commonmark_mode_has_no_tables(self):
        html = markdown_to_html(ROWSPAN_MD, ConversionOptions.for_mode("commonmark"))
        assert "<table" not in html

    def test_other_blocks_rendered_by_mistune(self):
        html = markdown_to_html("# Title\n\n- one\n- two\n\n> quoted\n")
        assert "<h1>Title</h1>" in html
        assert "<li>one</li>" in html
        assert "<blockquote>\n<p>quoted</p>\n</blockquote>" in html

    def test_inline_markup(self):
        html = markdown_to_html("Some *emphasis* and `code`.\n")
        assert html == "<p>Some <em>emphasis</em> and <code>code</code>.</p>\n"

    def test_standalone(self):
        html = markdown_to_html("Hello\n", ConversionOptions(standalone=True, title="Greeting"))
        assert html.startswith("<!DOCTYPE html>\n")
        assert "<title>Greeting</title>" in html
        assert "<p>Hello</p>" in html

    def test_pretty(self):
        html = markdown_to_html(ROWSPAN_MD, ConversionOptions(pretty=True))
        assert "\n <thead>\n" in html

    def test_idempotent_output(self):
        assert markdown_to_html("[Cap]\n\n" + ROWSPAN_MD) == markdown_to_html("[Cap]\n\n" + ROWSPAN_MD)
