"""Domain layer: entities, policies, ports and services."""
