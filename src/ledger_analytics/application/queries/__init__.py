"""Application queries (read side)."""
