"""Application DTOs (read models)."""
