"""Domain layer: entities and protocols, no framework dependencies."""
