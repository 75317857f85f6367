"""Event service for recording domain events and notifying subscribers."""

from collections import defaultdict
from collections.abc import Callable
from typing import Any

import structlog

from domain.entities.event import DomainEvent
from domain.repositories.event_log import IEventLog

logger = structlog.get_logger()

EventHandler = Callable[[DomainEvent], None]


class EventService:
    """Records domain events and fans them out to subscribers.

    Moderation and notification collaborators register handlers here, e.g.
    to open a review when a reply is flagged malicious or to show an
    exemplary reply on its author's profile.
    """

    def __init__(self, event_log: IEventLog) -> None:
        self._log = event_log
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, name: str, handler: EventHandler) -> None:
        """Register ``handler`` for events called ``name``."""
        self._handlers[name].append(handler)

    def unsubscribe(self, name: str, handler: EventHandler) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        handlers = self._handlers.get(name, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(
        self,
        name: str,
        actor_id: str | None,
        entity_type: str,
        entity_id: str,
        metadata: dict[str, Any] | None = None,
    ) -> DomainEvent:
        """Record an event and deliver it to its subscribers.

        Args:
            name: The event name (use Events constants).
            actor_id: The profile or account that caused the event, if any.
            entity_type: The type of entity affected.
            entity_id: The ID of the entity affected.
            metadata: Optional additional context. Copied into the event.

        Returns:
            The recorded DomainEvent.

        Handler exceptions propagate to the caller; the event stays recorded.
        """
        event = self.record(name, actor_id, entity_type, entity_id, metadata)
        self.dispatch(event)
        return event

    def record(
        self,
        name: str,
        actor_id: str | None,
        entity_type: str,
        entity_id: str,
        metadata: dict[str, Any] | None = None,
    ) -> DomainEvent:
        """Record an event without delivering it.

        Use together with ``dispatch`` when several events describe one
        change, so all of them are stored before any handler runs.
        """
        event = DomainEvent(
            name=name,
            actor_id=actor_id,
            entity_type=entity_type,
            entity_id=entity_id,
            metadata=dict(metadata or {}),
        )
        recorded = self._log.record(event)

        logger.info(
            "domain_event",
            event_name=name,
            entity_type=entity_type,
            entity_id=entity_id,
            actor_id=actor_id,
        )
        return recorded

    def dispatch(self, *events: DomainEvent) -> None:
        """Deliver recorded events to their subscribers.

        Every handler of every event runs even when an earlier one fails;
        the first failure is re-raised afterwards.
        """
        first_error: Exception | None = None
        for event in events:
            for handler in list(self._handlers.get(event.name, [])):
                try:
                    handler(event)
                except Exception as exc:
                    logger.error(
                        "event_handler_failed",
                        event_name=event.name,
                        entity_id=event.entity_id,
                        error=str(exc),
                    )
                    if first_error is None:
                        first_error = exc
        if first_error is not None:
            raise first_error
