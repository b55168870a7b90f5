"""Domain layer: configuration entities, their builders and validation."""
