"""In-memory implementation of IEventLog."""

from domain.entities.event import DomainEvent


class InMemoryEventLog:
    """Keeps events in memory. Order preserved by insertion."""

    def __init__(self) -> None:
        self._events: list[DomainEvent] = []

    def record(self, event: DomainEvent) -> DomainEvent:
        self._events.append(event)
        return event

    def get_for_entity(self, entity_type: str, entity_id: str) -> list[DomainEvent]:
        return [
            e for e in self._events if e.entity_type == entity_type and e.entity_id == entity_id
        ]

    def get_by_name(self, name: str) -> list[DomainEvent]:
        return [e for e in self._events if e.name == name]

    def all(self) -> list[DomainEvent]:
        """Return every recorded event."""
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)
