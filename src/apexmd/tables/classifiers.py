"""Cell, row, and paragraph classification helpers for advanced tables.

Each function inspects a node's text and answers one question: is this cell
a span marker, is this row a footer or filler row, does this paragraph hold
a caption.  Only nodes whose whole content is a single text run can be
markers; a cell containing emphasis, code, or a link is always ordinary.
"""

from apexmd.document.nodes import Node, NodeKind
from apexmd.tables.patterns import (
    BRACKET_CAPTION_RE,
    COLSPAN_MARKERS,
    DASH_FILLER_RE,
    FOOTER_MARKER_RE,
    PANDOC_CAPTION_RE,
    PLACEHOLDER_DASH,
    ROWSPAN_MARKER,
)


def cell_text(cell: Node) -> str | None:
    """Return the stripped plain text of a cell, or None if it holds markup."""
    text = cell.sole_text()
    return text.strip() if text is not None else None


# ─── Cell Markers ────────────────────────────────────────────────────────────


def is_colspan_marker(cell: Node) -> bool:
    """Return True for an empty cell or one holding only '<<'."""
    return cell_text(cell) in COLSPAN_MARKERS


def is_rowspan_marker(cell: Node) -> bool:
    """Return True for a cell holding only '^^'."""
    return cell_text(cell) == ROWSPAN_MARKER


def is_footer_marker(cell: Node) -> bool:
    """Return True for a cell holding only '===' (or more '=')."""
    text = cell_text(cell)
    return text is not None and bool(FOOTER_MARKER_RE.match(text))


def is_filler_cell(cell: Node) -> bool:
    """Return True for an empty cell, the placeholder dash, or a run of three or more '-'."""
    text = cell_text(cell)
    if text is None:
        return False
    return text in ("", PLACEHOLDER_DASH) or bool(DASH_FILLER_RE.match(text))


# ─── Row Classification ──────────────────────────────────────────────────────


def is_footer_row(cells: list[Node]) -> bool:
    """Return True if any cell in the row is a footer marker."""
    return any(is_footer_marker(cell) for cell in cells)


def is_separator_row(cells: list[Node]) -> bool:
    """Return True if the row has cells and every one of them is filler."""
    return bool(cells) and all(is_filler_cell(cell) for cell in cells)


# ─── Captions ────────────────────────────────────────────────────────────────


def bracket_caption(node: Node | None) -> str | None:
    """Return the caption of a '[Caption]' paragraph or cell, else None.

    The node must hold exactly one text child.  Blank captions ('[]', '[  ]')
    are not captions.
    """
    if node is None or len(node.children) != 1 or node.children[0].kind is not NodeKind.TEXT:
        return None
    match = BRACKET_CAPTION_RE.match(node.children[0].literal or "")
    if not match:
        return None
    caption = match.group(1).strip()
    return caption or None


def pandoc_caption(node: Node | None) -> str | None:
    """Return the caption of a ': Caption' paragraph, else None."""
    if node is None or node.kind is not NodeKind.PARAGRAPH:
        return None
    text = node.sole_text()
    if not text:
        return None
    match = PANDOC_CAPTION_RE.match(text)
    return match.group(1) if match else None
