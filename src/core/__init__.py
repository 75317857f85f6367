"""Cross-cutting concerns: configuration, errors, logging, time."""
