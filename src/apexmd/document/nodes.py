"""Document tree and per-node rendering hints.

The tree is built once from the parser's token stream (see builder.py) and
then annotated in place by the table passes.  Nodes are never deleted or
re-parented after building: removal is recorded as a hint, so every pass
after the first still sees the original structure.
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Iterator


class NodeKind(enum.Enum):
    """Kinds of node the table passes understand; everything else is OTHER."""

    DOCUMENT = "document"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    OTHER = "other"


@dataclass
class RenderHints:
    """Annotations written by the table passes and read by the renderer.

    colspan/rowspan apply to cells, footer to rows, caption to tables;
    removed applies to any node.
    """

    colspan: int = 1
    rowspan: int = 1
    removed: bool = False
    footer: bool = False
    caption: str | None = None


@dataclass(eq=False)
class Node:
    """One node of the document tree.

    ``token`` keeps the parser token the node was built from so that kinds
    the renderer does not handle itself can be handed back to the parser's
    own HTML renderer.  ``attrs`` holds parser attributes such as cell
    alignment.
    """

    kind: NodeKind
    children: list["Node"] = field(default_factory=list)
    parent: "Node | None" = field(default=None, repr=False)
    literal: str | None = None
    token: dict[str, Any] | None = field(default=None, repr=False)
    attrs: dict[str, Any] = field(default_factory=dict)
    hints: RenderHints | None = None

    # ── Tree building ────────────────────────────────────────────────────

    def append(self, child: "Node") -> "Node":
        """Attach *child* as the last child and return it."""
        child.parent = self
        self.children.append(child)
        return child

    # ── Navigation ───────────────────────────────────────────────────────

    def _sibling(self, offset: int) -> "Node | None":
        if self.parent is None:
            return None
        siblings = self.parent.children
        idx = next((i for i, sibling in enumerate(siblings) if sibling is self), None)
        if idx is None:
            return None
        target = idx + offset
        if 0 <= target < len(siblings):
            return siblings[target]
        return None

    @property
    def previous_sibling(self) -> "Node | None":
        return self._sibling(-1)

    @property
    def next_sibling(self) -> "Node | None":
        return self._sibling(1)

    def children_of_kind(self, kind: NodeKind) -> list["Node"]:
        """Return the direct children of the given kind, in order."""
        return [child for child in self.children if child.kind is kind]

    def walk(self) -> Iterator["Node"]:
        """Yield this node and all descendants in document (pre-)order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def sole_text(self) -> str | None:
        """Return the literal of this node's only child if it is a text node.

        An empty node yields ``""``.  Anything richer (several children, or a
        non-text child such as emphasis) yields ``None``.
        """
        if not self.children:
            return ""
        if len(self.children) == 1 and self.children[0].kind is NodeKind.TEXT:
            return self.children[0].literal or ""
        return None

    # ── Rendering hints ──────────────────────────────────────────────────

    @property
    def hint(self) -> RenderHints:
        """Current hints, or a fresh default record when none were written.

        Writes must go through ``edit_hints``; changes to the default record
        are not kept.
        """
        return self.hints if self.hints is not None else RenderHints()

    def edit_hints(self) -> RenderHints:
        """Return this node's hint record, creating it on first write."""
        if self.hints is None:
            self.hints = RenderHints()
        return self.hints

    @property
    def is_removed(self) -> bool:
        return self.hints is not None and self.hints.removed

    def mark_removed(self) -> None:
        self.edit_hints().removed = True
