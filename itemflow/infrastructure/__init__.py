"""Infrastructure adapters (logging, persistence)."""
