"""Unit tests for cell, row, and caption classification helpers."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from apexmd.document.nodes import Node, NodeKind
from apexmd.tables.classifiers import (
    bracket_caption,
    is_colspan_marker,
    is_filler_cell,
    is_footer_marker,
    is_footer_row,
    is_rowspan_marker,
    is_separator_row,
    pandoc_caption,
)


def make_cell(text: str) -> Node:
    """Build a TableCell holding *text* (no child for an empty string)."""
    cell = Node(NodeKind.TABLE_CELL)
    if text:
        cell.append(Node(NodeKind.TEXT, literal=text))
    return cell


def make_paragraph(text: str) -> Node:
    paragraph = Node(NodeKind.PARAGRAPH)
    paragraph.append(Node(NodeKind.TEXT, literal=text))
    return paragraph


def emphasis_cell() -> Node:
    cell = Node(NodeKind.TABLE_CELL)
    cell.append(Node(NodeKind.OTHER, token={"type": "emphasis", "children": [{"type": "text", "raw": "x"}]}))
    return cell


# ===========================================================================
# Span markers
# ===========================================================================


class TestIsColspanMarker:

    @pytest.mark.parametrize("text", ["", "  ", "<<", "<<  ", " << "])
    def test_markers(self, text):
        assert is_colspan_marker(make_cell(text)) is True

    @pytest.mark.parametrize("text", ["A", "<<<", "< <", "^^"])
    def test_non_markers(self, text):
        assert is_colspan_marker(make_cell(text)) is False

    def test_markup_cell(self):
        assert is_colspan_marker(emphasis_cell()) is False


class TestIsRowspanMarker:

    def test_marker(self):
        assert is_rowspan_marker(make_cell("^^")) is True

    def test_trailing_whitespace(self):
        assert is_rowspan_marker(make_cell("^^   ")) is True

    @pytest.mark.parametrize("text", ["", "^", "^^^", "^^ x"])
    def test_non_markers(self, text):
        assert is_rowspan_marker(make_cell(text)) is False


class TestIsFooterMarker:

    @pytest.mark.parametrize("text", ["===", "=====", " === "])
    def test_markers(self, text):
        assert is_footer_marker(make_cell(text)) is True

    @pytest.mark.parametrize("text", ["==", "=== x", "", "---"])
    def test_non_markers(self, text):
        assert is_footer_marker(make_cell(text)) is False


class TestIsFillerCell:

    def test_empty(self):
        assert is_filler_cell(make_cell("")) is True

    def test_placeholder_dash(self):
        assert is_filler_cell(make_cell("—")) is True

    def test_typed_dash_run(self):
        assert is_filler_cell(make_cell("---")) is True
        assert is_filler_cell(make_cell(" ----- ")) is True

    def test_short_dash_run_is_content(self):
        assert is_filler_cell(make_cell("--")) is False

    def test_markup_cell(self):
        assert is_filler_cell(emphasis_cell()) is False


# ===========================================================================
# Rows
# ===========================================================================


class TestRowClassification:

    def test_footer_row_any_cell(self):
        assert is_footer_row([make_cell("Total"), make_cell("===")]) is True

    def test_not_footer_row(self):
        assert is_footer_row([make_cell("A"), make_cell("B")]) is False

    def test_separator_row(self):
        assert is_separator_row([make_cell("—"), make_cell(""), make_cell("—")]) is True

    def test_row_with_content_is_not_separator(self):
        assert is_separator_row([make_cell("—"), make_cell("A")]) is False

    def test_empty_row_is_not_separator(self):
        assert is_separator_row([]) is False


# ===========================================================================
# Captions
# ===========================================================================


class TestBracketCaption:

    def test_caption(self):
        assert bracket_caption(make_paragraph("[Table 1: Results]")) == "Table 1: Results"

    def test_trailing_whitespace(self):
        assert bracket_caption(make_paragraph("[Results]   ")) == "Results"

    def test_inner_whitespace_stripped(self):
        assert bracket_caption(make_paragraph("[  Results  ]")) == "Results"

    def test_text_after_bracket(self):
        assert bracket_caption(make_paragraph("[Results] and more")) is None

    def test_no_leading_bracket(self):
        assert bracket_caption(make_paragraph("See [Results]")) is None

    def test_unclosed(self):
        assert bracket_caption(make_paragraph("[Results")) is None

    def test_blank_caption(self):
        assert bracket_caption(make_paragraph("[  ]")) is None

    def test_cell_caption(self):
        assert bracket_caption(make_cell("[Row caption]")) == "Row caption"

    def test_none(self):
        assert bracket_caption(None) is None

    def test_rich_paragraph(self):
        paragraph = make_paragraph("[Results]")
        paragraph.append(Node(NodeKind.OTHER, token={"type": "softbreak"}))
        assert bracket_caption(paragraph) is None


class TestPandocCaption:

    def test_caption(self):
        assert pandoc_caption(make_paragraph(": Quarterly sales")) == "Quarterly sales"

    def test_strips_trailing(self):
        assert pandoc_caption(make_paragraph(":   Quarterly sales  ")) == "Quarterly sales"

    def test_requires_space(self):
        assert pandoc_caption(make_paragraph(":Quarterly")) is None

    def test_requires_text(self):
        assert pandoc_caption(make_paragraph(":   ")) is None

    def test_only_paragraphs(self):
        assert pandoc_caption(make_cell(": Caption")) is None
