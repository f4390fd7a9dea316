"""Table caption detection.

A caption can come from three places, tried in this order:

  1. a '[Caption]' paragraph right before the table, then right after it
  2. a Pandoc-style ': Caption' paragraph right after the table
  3. a trailing table row whose only surviving cell is '[Caption]'

Every source goes through attach_caption, where the first caption wins.  A
matching source is hidden from output whether or not its caption won, so a
table never shows its caption twice.

Runs after span resolution: a '| [Caption] | | |' row only has one surviving
cell once the empty cells have been merged into it.
"""

import logging

from apexmd.document.nodes import Node, NodeKind
from apexmd.tables.classifiers import bracket_caption, pandoc_caption
from apexmd.tables.locator import LocatedTable

logger = logging.getLogger(__name__)


def attach_caption(table: Node, caption: str) -> bool:
    """Give *table* its caption unless it already has one.  Returns True if attached."""
    if table.hint.caption is not None:
        logger.debug("Table already captioned %r; ignoring %r", table.hint.caption, caption)
        return False
    table.edit_hints().caption = caption
    return True


def _paragraph_caption(node: Node | None) -> str | None:
    # A paragraph already used as a caption (e.g. for the previous table) is not reused
    if node is None or node.kind is not NodeKind.PARAGRAPH or node.is_removed:
        return None
    return bracket_caption(node)


def find_caption_row(table: Node) -> tuple[Node, str] | None:
    """Return the last non-header row that is a one-cell '[Caption]' row, with its caption."""
    found = None
    rows = table.children_of_kind(NodeKind.TABLE_ROW)
    for row in rows[1:]:
        surviving = [cell for cell in row.children_of_kind(NodeKind.TABLE_CELL) if not cell.is_removed]
        if len(surviving) != 1:
            continue
        caption = bracket_caption(surviving[0])
        if caption is not None:
            found = (row, caption)
    return found


def resolve_captions(located: LocatedTable) -> str | None:
    """Attach a caption to the located table and hide its source(s).

    Returns the table's caption afterwards (None if it has none).
    """
    table = located.table

    for neighbour in (located.before, located.after):
        caption = _paragraph_caption(neighbour)
        if caption is not None:
            attach_caption(table, caption)
            neighbour.mark_removed()

    after = located.after
    if after is not None and not after.is_removed:
        caption = pandoc_caption(after)
        if caption is not None:
            attach_caption(table, caption)
            after.mark_removed()

    caption_row = find_caption_row(table)
    if caption_row is not None:
        row, caption = caption_row
        attach_caption(table, caption)
        row.mark_removed()

    return table.hint.caption
