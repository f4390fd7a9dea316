"""HTML rendering of the annotated document tree.

Tables, paragraphs, and text are rendered here so that rendering hints are
honoured; every other block or inline node is handed back to mistune's own
HTMLRenderer using the token the node was built from.

Table output contract:
  - nodes hinted ``removed`` are omitted, as is a row whose cells are all removed
  - ``colspan`` / ``rowspan`` > 1 become attributes on the cell
  - rows hinted ``footer`` go into ``<tfoot>`` instead of ``<tbody>``
  - a table with a ``caption`` is wrapped in ``<figure class="table-figure">``
    with an escaped ``<figcaption>`` above (or below) it
"""

import logging
from typing import Any

import mistune
from mistune.core import BlockState
from mistune.util import escape

from apexmd.config import ConversionOptions
from apexmd.document.builder import markdown_plugins, resolve_plugins
from apexmd.document.nodes import Node, NodeKind

logger = logging.getLogger(__name__)


class HtmlRenderer:
    """Render a Document node to an HTML fragment."""

    def __init__(self, options: ConversionOptions | None = None):
        self.options = options or ConversionOptions()
        # Only the renderer of this instance is used; plugins register their render functions on it
        self._mistune = mistune.create_markdown(escape=self.options.escape_html, plugins=resolve_plugins(markdown_plugins(self.options))).renderer
        self._table_count = 0

    def render(self, document: Node) -> str:
        self._table_count = 0
        return self._render_blocks(document.children)

    # ── Blocks ───────────────────────────────────────────────────────────

    def _render_blocks(self, nodes: list[Node]) -> str:
        return "".join(self._render_block(node) for node in nodes)

    def _render_block(self, node: Node) -> str:
        if node.is_removed:
            return ""
        if node.kind is NodeKind.TABLE:
            return self._render_table(node)
        if node.kind is NodeKind.PARAGRAPH:
            return f"<p>{self._render_inline(node.children)}</p>\n"
        if node.kind is NodeKind.TEXT:
            return self._mistune.text(node.literal or "")
        if node.children:
            # Container (block quote, list, list item): render our children, let mistune wrap them
            return self._render_token(node.token, raw=self._render_blocks(node.children))
        return self._render_token(node.token)

    def _render_inline(self, nodes: list[Node]) -> str:
        parts = []
        for node in nodes:
            if node.is_removed:
                continue
            if node.kind is NodeKind.TEXT:
                parts.append(self._mistune.text(node.literal or ""))
            else:
                parts.append(self._render_token(node.token))
        return "".join(parts)

    def _render_token(self, token: dict[str, Any] | None, raw: str | None = None) -> str:
        if token is None:
            return ""
        if raw is not None:
            token = {"type": token["type"], "attrs": token.get("attrs", {}), "raw": raw}
        return self._mistune.render_token(token, BlockState())

    # ── Tables ───────────────────────────────────────────────────────────

    def _render_table(self, table: Node) -> str:
        self._table_count += 1
        caption = table.hint.caption
        rows = table.children_of_kind(NodeKind.TABLE_ROW)
        header, body = rows[:1], rows[1:]

        row_headers = self.options.row_headers and bool(header) and _starts_with_blank_cell(header[0])

        table_attrs = ""
        caption_html = ""
        if caption is not None:
            caption_id = f"table-caption-{self._table_count}"
            id_attr = f' id="{caption_id}"' if self.options.enable_aria else ""
            caption_html = f"<figcaption{id_attr}>{escape(caption)}</figcaption>\n"
            if self.options.enable_aria:
                table_attrs = f' role="table" aria-describedby="{caption_id}"'
        elif self.options.enable_aria:
            table_attrs = ' role="table"'

        parts = [f"<table{table_attrs}>\n"]
        parts.append(_section("thead", [self._render_row(row, "th") for row in header]))
        parts.append(_section("tbody", [self._render_row(row, "td", row_headers) for row in body if not row.hint.footer]))
        parts.append(_section("tfoot", [self._render_row(row, "td", row_headers) for row in body if row.hint.footer]))
        parts.append("</table>\n")
        table_html = "".join(parts)

        if caption is None:
            return table_html
        if self.options.caption_position == "below":
            return f'<figure class="table-figure">\n{table_html}{caption_html}</figure>\n'
        return f'<figure class="table-figure">\n{caption_html}{table_html}</figure>\n'

    def _render_row(self, row: Node, tag: str, row_headers: bool = False) -> str:
        if row.is_removed:
            return ""
        cells = row.children_of_kind(NodeKind.TABLE_CELL)
        if cells and all(cell.is_removed for cell in cells):
            return ""
        rendered = []
        for col, cell in enumerate(cells):
            if cell.is_removed:
                continue
            if row_headers and col == 0:
                rendered.append(self._render_cell(cell, "th", ' scope="row"'))
            else:
                rendered.append(self._render_cell(cell, tag))
        return "<tr>\n" + "".join(rendered) + "</tr>\n"

    def _render_cell(self, cell: Node, tag: str, extra_attrs: str = "") -> str:
        attrs = extra_attrs
        if cell.hint.colspan > 1:
            attrs += f' colspan="{cell.hint.colspan}"'
        if cell.hint.rowspan > 1:
            attrs += f' rowspan="{cell.hint.rowspan}"'
        align = cell.attrs.get("align")
        if align:
            attrs += f' style="text-align:{align}"'
        return f"<{tag}{attrs}>{self._render_inline(cell.children)}</{tag}>\n"


def _starts_with_blank_cell(header_row: Node) -> bool:
    cells = header_row.children_of_kind(NodeKind.TABLE_CELL)
    if not cells:
        return False
    text = cells[0].sole_text()
    return text is not None and not text.strip()


def _section(tag: str, rows: list[str]) -> str:
    body = "".join(rows)
    if not body:
        return ""
    return f"<{tag}>\n{body}</{tag}>\n"
