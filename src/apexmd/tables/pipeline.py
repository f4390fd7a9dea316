"""Advanced-table pass over a whole document.

For every table, in document order, resolve spans and then captions.  The
pass only writes rendering hints; the tree's structure is left untouched,
so it is safe to run again on an already-processed tree.

Usage:
    python -m apexmd.tables.pipeline path/to/file.md
"""

import logging
import sys
from pathlib import Path

from apexmd.document.nodes import Node
from apexmd.tables.captions import resolve_captions
from apexmd.tables.locator import iter_tables
from apexmd.tables.spans import resolve_spans

logger = logging.getLogger(__name__)


def run(document: Node) -> Node:
    """Apply span and caption resolution to every table in *document*."""
    n_tables = 0
    n_captions = 0
    for located in iter_tables(document):
        n_tables += 1
        resolve_spans(located.table)
        if resolve_captions(located) is not None:
            n_captions += 1
    logger.info("Processed %d tables (%d captioned)", n_tables, n_captions)
    return document


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")

    from apexmd.document.builder import parse_markdown  # pylint: disable=ungrouped-imports

    source = Path(sys.argv[1]).read_text(encoding="utf-8")
    processed = run(parse_markdown(source))
    for table_node in (located.table for located in iter_tables(processed)):
        logger.info("Table caption: %r", table_node.hint.caption)
