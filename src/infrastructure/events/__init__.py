"""Event log adapters."""
