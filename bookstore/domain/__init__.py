"""Pure domain rules for book records (no I/O, no FastAPI)."""
