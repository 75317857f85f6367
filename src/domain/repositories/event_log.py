"""Event log protocol."""

from typing import Protocol

from domain.entities.event import DomainEvent


class IEventLog(Protocol):
    """Append-only store for domain events."""

    def record(self, event: DomainEvent) -> DomainEvent:
        """Append an event."""
        ...

    def get_for_entity(self, entity_type: str, entity_id: str) -> list[DomainEvent]:
        """Get events for a specific entity, oldest first."""
        ...

    def get_by_name(self, name: str) -> list[DomainEvent]:
        """Get events with the given name, oldest first."""
        ...
