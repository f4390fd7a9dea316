"""Advanced table post-processing: spans, footers, and captions.

Submodules:
  patterns     -- marker tokens and compiled caption patterns
  classifiers  -- cell / row / paragraph classification helpers
  grid         -- TableGrid row/column view and RowKind labels
  locator      -- document-order table traversal with neighbouring blocks
  spans        -- row classification and colspan/rowspan merging
  captions     -- caption detection and the first-wins attach
  pipeline     -- run() entry point over a whole document
"""
