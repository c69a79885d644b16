"""Internal helpers (config stack, logging, ANSI colors)."""
