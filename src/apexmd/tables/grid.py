"""Row/column view of a Table node used by the span passes.

``TableGrid`` indexes the table's rows and each row's cells by position so
that merges are plain index arithmetic.  Column indexes count cells only.
The grid holds references to the tree's own nodes; hints written through it
land on the tree.
"""

import enum
from dataclasses import dataclass, field
from typing import Iterator

from apexmd.document.nodes import Node, NodeKind


class RowKind(enum.Enum):
    HEADER = "header"
    FOOTER = "footer"
    SEPARATOR = "separator"
    DATA = "data"


# Rows a rowspan marker may merge into
ANCHOR_KINDS = (RowKind.HEADER, RowKind.DATA)


@dataclass
class GridRow:
    node: Node
    cells: list[Node] = field(default_factory=list)
    kind: RowKind = RowKind.DATA

    def cell_at(self, col: int) -> Node | None:
        return self.cells[col] if 0 <= col < len(self.cells) else None


@dataclass
class TableGrid:
    table: Node
    rows: list[GridRow] = field(default_factory=list)

    @classmethod
    def from_table(cls, table: Node) -> "TableGrid":
        rows = [
            GridRow(node=row, cells=row.children_of_kind(NodeKind.TABLE_CELL))
            for row in table.children_of_kind(NodeKind.TABLE_ROW)
        ]
        return cls(table=table, rows=rows)

    def anchors_above(self, row_idx: int) -> Iterator[GridRow]:
        """Yield anchor-eligible rows above *row_idx*, nearest first."""
        for idx in range(row_idx - 1, -1, -1):
            if self.rows[idx].kind in ANCHOR_KINDS:
                yield self.rows[idx]

    def count(self, kind: RowKind) -> int:
        return sum(1 for row in self.rows if row.kind is kind)
