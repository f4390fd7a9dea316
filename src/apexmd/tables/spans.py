"""Column/row merging and footer detection for one table.

Two passes over the table's grid:

  1. classify_rows -- label every row HEADER, FOOTER, SEPARATOR, or DATA.
     The first row is the header.  A row containing a '===' cell starts the
     footer, and every row after it is a footer row too.  A row made only of
     empty, placeholder-dash, or "---" cells is a separator.
  2. resolve_spans -- apply each label: footer rows get the footer hint and
     lose their '===' cells, separator rows lose every cell, and data rows
     have their '<<' / empty cells merged left and their '^^' cells merged up.

Cells already marked removed are skipped, so running the passes twice over
the same tree changes nothing.
"""

import logging

from apexmd.document.nodes import Node
from apexmd.tables.classifiers import (
    is_colspan_marker,
    is_footer_marker,
    is_footer_row,
    is_rowspan_marker,
    is_separator_row,
)
from apexmd.tables.grid import GridRow, RowKind, TableGrid

logger = logging.getLogger(__name__)


# ─── Pass 1: Row Classification ──────────────────────────────────────────────


def classify_rows(grid: TableGrid) -> None:
    """Label each row of *grid* in place; the footer label is forward-filled."""
    footer_started = False
    for row_idx, row in enumerate(grid.rows):
        if row_idx == 0:
            row.kind = RowKind.HEADER
        elif footer_started or is_footer_row(row.cells):
            footer_started = True
            row.kind = RowKind.FOOTER
        elif is_separator_row(row.cells):
            row.kind = RowKind.SEPARATOR
        else:
            row.kind = RowKind.DATA


# ─── Pass 2: Merges ──────────────────────────────────────────────────────────


def _nearest_surviving_left(cells: list[Node], col: int) -> Node | None:
    """Return the closest cell left of *col* that has not been removed."""
    for candidate in reversed(cells[:col]):
        if not candidate.is_removed:
            return candidate
    return None


def _rowspan_target(grid: TableGrid, row_idx: int, col: int) -> Node | None:
    """Walk up through anchor rows to the first surviving cell in column *col*."""
    for anchor in grid.anchors_above(row_idx):
        candidate = anchor.cell_at(col)
        if candidate is not None and not candidate.is_removed:
            return candidate
    return None


def _merge_data_row(grid: TableGrid, row_idx: int) -> None:
    row = grid.rows[row_idx]
    for col, cell in enumerate(row.cells):
        if cell.is_removed:
            continue

        if is_colspan_marker(cell):
            target = _nearest_surviving_left(row.cells, col)
            if target is None:
                # Leading empty cell: nothing to merge into, render as-is
                continue
            target.edit_hints().colspan += 1
            cell.mark_removed()

        elif is_rowspan_marker(cell):
            target = _rowspan_target(grid, row_idx, col)
            if target is not None:
                target.edit_hints().rowspan += 1
            else:
                logger.debug("Row %d col %d: '^^' has no cell above to merge into; dropping it", row_idx, col)
            # The marker never renders, even when nothing absorbed it
            cell.mark_removed()


def _mark_footer_row(row: GridRow) -> None:
    row.node.edit_hints().footer = True
    for cell in row.cells:
        if is_footer_marker(cell):
            cell.mark_removed()


def resolve_spans(table: Node) -> TableGrid:
    """Classify the rows of *table* and apply merges, footer, and filler removal.

    Returns the grid so callers can report on the row classification.
    """
    grid = TableGrid.from_table(table)
    classify_rows(grid)

    for row_idx, row in enumerate(grid.rows):
        if row.kind is RowKind.FOOTER:
            _mark_footer_row(row)
        elif row.kind is RowKind.SEPARATOR:
            for cell in row.cells:
                cell.mark_removed()
        elif row.kind is RowKind.DATA:
            _merge_data_row(grid, row_idx)

    logger.debug(
        "Resolved spans: %d rows (%d data, %d separator, %d footer)",
        len(grid.rows),
        grid.count(RowKind.DATA),
        grid.count(RowKind.SEPARATOR),
        grid.count(RowKind.FOOTER),
    )
    return grid
