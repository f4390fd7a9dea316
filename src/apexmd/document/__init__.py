"""Document tree built from the markdown parser's output.

Submodules:
  nodes    -- Node, NodeKind, and the RenderHints each node may carry
  builder  -- mistune token stream -> Node tree, plus direct constructors
"""
