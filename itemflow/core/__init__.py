"""Core building blocks: configuration, enums, errors and the composition root."""
