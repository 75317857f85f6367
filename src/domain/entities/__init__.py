"""Domain entities and value objects."""
