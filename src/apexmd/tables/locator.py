"""Find every table in a document tree, with its neighbouring blocks."""

from dataclasses import dataclass
from typing import Iterator

from apexmd.document.nodes import Node, NodeKind


@dataclass(frozen=True)
class LocatedTable:
    """A table plus the siblings immediately before and after it."""

    table: Node
    before: Node | None
    after: Node | None


def iter_tables(root: Node) -> Iterator[LocatedTable]:
    """Yield every Table under *root* in document order, at any depth.

    Read-only: the caller may annotate hints on what it receives, but the
    traversal itself never changes the tree.
    """
    for node in root.walk():
        if node.kind is NodeKind.TABLE:
            yield LocatedTable(table=node, before=node.previous_sibling, after=node.next_sibling)
