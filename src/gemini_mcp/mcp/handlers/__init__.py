"""Tool handlers, one module per tool family."""
