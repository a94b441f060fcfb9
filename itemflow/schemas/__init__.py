"""HTTP-layer schemas: request bodies and response visibility."""
