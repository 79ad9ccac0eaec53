"""HTTP API serving analysis outlines."""
