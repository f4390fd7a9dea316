"""Build the document tree from mistune's AST tokens.

mistune is run with ``renderer=None`` so it returns its token list instead of
HTML.  This module maps those tokens onto ``Node`` objects:

  - ``blank_line`` tokens are dropped, so a table's siblings are the blocks
    that are actually next to it
  - table head and body rows are flattened into TableRow children of the
    Table, header first, in document order
  - tables come from the gfm_table plugin, so every body row has exactly as
    many cells as the header
  - adjacent inline ``text`` tokens are merged into one Text node (mistune
    splits text at characters that start inline rules, e.g. ``[`` and ``<``)
  - block quotes and lists keep their children so nested tables are found;
    every other token becomes an OTHER leaf that keeps the token for rendering
"""

import logging
from typing import Any

import mistune

from apexmd.config import ConversionOptions
from apexmd.document.gfm_table import gfm_table
from apexmd.document.nodes import Node, NodeKind

logger = logging.getLogger(__name__)

# Block tokens whose children are built as nodes rather than kept opaque
CONTAINER_TYPES = ("block_quote", "list", "list_item", "task_list_item")

# Plugins mistune does not register by short name, mapped to their import paths
PLUGIN_PATHS = {
    "table_in_quote": "mistune.plugins.table.table_in_quote",
    "table_in_list": "mistune.plugins.table.table_in_list",
}


def markdown_plugins(options: ConversionOptions) -> list:
    """Return the mistune plugins enabled by *options*."""
    plugins: list = []
    if options.enable_tables:
        plugins.extend([gfm_table, "table_in_quote", "table_in_list"])
    if options.enable_strikethrough:
        plugins.append("strikethrough")
    if options.enable_task_lists:
        plugins.append("task_lists")
    return plugins


def resolve_plugins(plugins: list) -> list:
    """Map plugin short names to import paths mistune can load."""
    return [PLUGIN_PATHS.get(p, p) if isinstance(p, str) else p for p in plugins]


def parse_markdown(text: str, options: ConversionOptions | None = None) -> Node:
    """Parse *text* with mistune and return the document tree."""
    options = options or ConversionOptions()
    markdown = mistune.create_markdown(
        escape=options.escape_html,
        hard_wrap=options.hard_wrap,
        renderer=None,
        plugins=resolve_plugins(markdown_plugins(options)),
    )
    tokens, _state = markdown.parse(text)
    document = build_document(tokens)
    logger.debug("Parsed %d top-level blocks", len(document.children))
    return document


# ─── Token Mapping ───────────────────────────────────────────────────────────


def build_document(tokens: list[dict[str, Any]]) -> Node:
    """Convert a mistune block token list into a Document node."""
    document = Node(NodeKind.DOCUMENT)
    _append_blocks(document, tokens)
    return document


def _append_blocks(parent: Node, tokens: list[dict[str, Any]]) -> None:
    for token in tokens:
        token_type = token.get("type")
        if token_type == "blank_line":
            continue
        if token_type == "table":
            parent.append(_build_table(token))
        elif token_type == "paragraph":
            paragraph = parent.append(Node(NodeKind.PARAGRAPH, token=token))
            _append_inline(paragraph, token.get("children", []))
        elif token_type in CONTAINER_TYPES:
            container = parent.append(Node(NodeKind.OTHER, token=token))
            _append_blocks(container, token.get("children", []))
        else:
            parent.append(Node(NodeKind.OTHER, token=token))


def _append_inline(parent: Node, tokens: list[dict[str, Any]]) -> None:
    """Append inline tokens to *parent*, merging runs of text into one node."""
    for token in tokens:
        if token.get("type") == "text":
            last = parent.children[-1] if parent.children else None
            if last is not None and last.kind is NodeKind.TEXT:
                last.literal = (last.literal or "") + token.get("raw", "")
            else:
                parent.append(Node(NodeKind.TEXT, literal=token.get("raw", "")))
        else:
            parent.append(Node(NodeKind.OTHER, token=token))


def _build_table(token: dict[str, Any]) -> Node:
    """Flatten mistune's table_head/table_body sections into rows."""
    table = Node(NodeKind.TABLE, token=token)
    for section in token.get("children", []):
        section_type = section.get("type")
        if section_type == "table_head":
            # Header cells sit directly under table_head (no table_row)
            row = table.append(Node(NodeKind.TABLE_ROW, attrs={"head": True}))
            _append_cells(row, section.get("children", []))
        elif section_type == "table_body":
            for row_token in section.get("children", []):
                row = table.append(Node(NodeKind.TABLE_ROW))
                _append_cells(row, row_token.get("children", []))
    return table


def _append_cells(row: Node, cell_tokens: list[dict[str, Any]]) -> None:
    for cell_token in cell_tokens:
        if cell_token.get("type") != "table_cell":
            continue
        cell = row.append(Node(NodeKind.TABLE_CELL, token=cell_token, attrs=dict(cell_token.get("attrs", {}))))
        _append_inline(cell, cell_token.get("children", []))


# ─── Direct Construction ─────────────────────────────────────────────────────


def text_paragraph(text: str) -> Node:
    """Return a Paragraph holding a single Text node."""
    paragraph = Node(NodeKind.PARAGRAPH)
    paragraph.append(Node(NodeKind.TEXT, literal=text))
    return paragraph


def table_from_rows(rows: list[list[str]], aligns: list[str | None] | None = None) -> Node:
    """Build a Table directly from rows of cell strings; the first row is the header.

    Empty strings become empty cells, matching what the parser produces for
    ``|   |``.  Rows may have differing lengths.
    """
    table = Node(NodeKind.TABLE)
    for row_idx, values in enumerate(rows):
        row = table.append(Node(NodeKind.TABLE_ROW, attrs={"head": True} if row_idx == 0 else {}))
        for col_idx, value in enumerate(values):
            align = aligns[col_idx] if aligns and col_idx < len(aligns) else None
            cell = row.append(Node(NodeKind.TABLE_CELL, attrs={"align": align, "head": row_idx == 0}))
            if value:
                cell.append(Node(NodeKind.TEXT, literal=value))
    return table


def document_from(*blocks: Node) -> Node:
    """Wrap already-built block nodes in a Document."""
    document = Node(NodeKind.DOCUMENT)
    for block in blocks:
        document.append(block)
    return document
