"""Repository protocols implemented by infrastructure adapters."""
