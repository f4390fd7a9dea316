"""Pipe tables for mistune with GitHub Flavored Markdown row widths.

mistune's own table rule gives up on the whole table when one body row has a
different number of cells than the header.  GFM instead pads short rows with
empty cells and ignores the excess cells of long rows, so a one-cell
``| [Caption] |`` row or a short row written to get a colspan still belongs
to its table.  The rules here parse tables that way and emit the same tokens
as mistune's plugin; rendering is left to that plugin, which ``gfm_table``
loads first.
"""

import re
from typing import Any

from mistune.plugins.table import table

# First line of a table whose rows are fenced with leading and trailing pipes
PIPE_TABLE_PATTERN = r"^ {0,3}\|[^\n]*\|[ \t]*(?:\n|$)"

# First line of a table without the outer pipes: "A | B"
NP_TABLE_PATTERN = r"^ {0,3}\S[^\n]*\|[^\n]*(?:\n|$)"

# Delimiter row cell: dashes, optionally flanked by colons
DELIMITER_CELL_RE = re.compile(r"^(:?)-+(:?)$")


def gfm_table(md) -> None:
    """mistune plugin: tables whose body rows are padded or cut to the header width."""
    table(md)
    # Same rule names, so table_in_quote / table_in_list pick these up too
    md.block.register("table", PIPE_TABLE_PATTERN, _parse_pipe_table, before="paragraph")
    md.block.register("nptable", NP_TABLE_PATTERN, _parse_np_table, before="paragraph")


def _parse_pipe_table(block, m, state) -> int | None:  # pylint: disable=unused-argument
    return _parse_table(m, state, _strip_pipe_row)


def _parse_np_table(block, m, state) -> int | None:  # pylint: disable=unused-argument
    return _parse_table(m, state, _strip_np_row)


def _parse_table(m, state, strip_row) -> int | None:
    pos = m.end()
    header = strip_row(m.group(0))
    if header is None or pos >= state.cursor_max:
        return None
    delimiter_line = state.get_line(pos)
    delimiter = strip_row(delimiter_line)
    if delimiter is None:
        return None

    header_cells = split_cells(header)
    aligns = parse_aligns(split_cells(delimiter))
    if aligns is None or len(aligns) != len(header_cells):
        return None
    pos += len(delimiter_line)

    rows = []
    while pos < state.cursor_max:
        line = state.get_line(pos)
        text = strip_row(line)
        if text is None:
            break
        rows.append({"type": "table_row", "children": _cells(normalise_width(split_cells(text), len(aligns)), aligns, head=False)})
        pos += len(line)

    head = {"type": "table_head", "children": _cells(header_cells, aligns, head=True)}
    state.append_token({"type": "table", "children": [head, {"type": "table_body", "children": rows}]})
    return pos


# ─── Row Helpers ─────────────────────────────────────────────────────────────


def split_cells(text: str) -> list[str]:
    """Split a row's inner text at unescaped pipes, stripping each cell."""
    cells = []
    start = 0
    for pos, char in enumerate(text):
        if char == "|" and not _is_escaped(text, pos):
            cells.append(text[start:pos].strip())
            start = pos + 1
    cells.append(text[start:].strip())
    return cells


def normalise_width(cells: list[str], width: int) -> list[str]:
    """Pad *cells* with empty cells, or drop the excess, to exactly *width*."""
    return cells[:width] + [""] * (width - len(cells))


def parse_aligns(cells: list[str]) -> list[str | None] | None:
    """Return the column alignments of a delimiter row, or None if it is not one."""
    aligns: list[str | None] = []
    for cell in cells:
        match = DELIMITER_CELL_RE.match(cell)
        if not match:
            return None
        left, right = match.groups()
        if left and right:
            aligns.append("center")
        elif left:
            aligns.append("left")
        elif right:
            aligns.append("right")
        else:
            aligns.append(None)
    return aligns


def _cells(texts: list[str], aligns: list[str | None], head: bool) -> list[dict[str, Any]]:
    return [{"type": "table_cell", "text": text, "attrs": {"align": aligns[i], "head": head}} for i, text in enumerate(texts)]


def _is_escaped(text: str, pos: int) -> bool:
    backslashes = 0
    pos -= 1
    while pos >= 0 and text[pos] == "\\":
        backslashes += 1
        pos -= 1
    return backslashes % 2 == 1


def _strip_pipe_row(line: str) -> str | None:
    text = line.rstrip("\n").rstrip(" \t").lstrip(" ")
    if len(text) < 2 or not text.startswith("|") or not text.endswith("|"):
        return None
    return text[1:-1]


def _strip_np_row(line: str) -> str | None:
    text = line.rstrip("\n").rstrip(" \t")
    if not text or "|" not in text:
        return None
    return text
