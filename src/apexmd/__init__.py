"""Markdown to HTML with advanced tables: column/row spans, footers, and captions.

Submodules:
  config    -- ConversionOptions, mode presets, environment overrides
  document  -- node tree built from mistune's AST
  tables    -- advanced-table post-processing pass
  render    -- HTML rendering of the annotated tree
  output    -- pretty printing and standalone documents
  convert   -- markdown_to_html() entry point
  cli       -- command line interface
"""

__version__ = "0.1.0"
