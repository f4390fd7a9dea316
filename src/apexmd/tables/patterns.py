"""Compiled regex patterns and literal tokens for advanced table markup.

These identify the markers authors put in table cells and in the paragraphs
around a table: span continuations, footer separators, filler cells, and
captions.  Used by classifiers.py.  Cell patterns are applied to text that
has already been stripped of surrounding whitespace.
"""

import re

# ─── Span Markers ────────────────────────────────────────────────────────────

# Colspan continuation: an empty cell, or "<<"
COLSPAN_MARKERS = ("", "<<")

# Rowspan continuation: "^^"
ROWSPAN_MARKER = "^^"


# ─── Row Markers ─────────────────────────────────────────────────────────────

# Footer separator cell: three or more "=" and nothing else
FOOTER_MARKER_RE = re.compile(r"^={3,}$")

# Filler cell in separator/blank rows.  Smart typography turns a "---"
# alignment cell into an em dash, which is what ends up in the cell.
PLACEHOLDER_DASH = "—"

# The same filler as typed, for parsers that leave "---" alone
DASH_FILLER_RE = re.compile(r"^-{3,}$")


# ─── Caption Patterns ────────────────────────────────────────────────────────

# "[Caption Text]" with only whitespace after the first closing bracket
BRACKET_CAPTION_RE = re.compile(r"^\[([^\]]*)\]\s*$")

# Pandoc-style ": Caption Text" paragraph after a table
PANDOC_CAPTION_RE = re.compile(r"^:\s+(\S.*?)\s*$")
