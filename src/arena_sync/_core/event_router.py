# Area: Core
"""
arena_sync._core.event_router — Session Event Router
====================================================

Routes inbound session events to their handlers based on event type.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

from .enums import SessionEvent
from .outbound import OutboundMessage

logger = logging.getLogger("arena_sync.core.router")


class EventHandler(Protocol):
    """Protocol for session event handlers."""

    def handle(self, connection_id: str, payload: Any) -> Optional[List[OutboundMessage]]:
        """Handle an event and return outbound messages, or None if dropped."""
        ...


class EventRouter:
    """
    Routes session events to handlers.

    Usage:
        router = EventRouter()
        router.register_handler(SessionEvent.JOIN_GAME, join_handler)
        messages = router.route(connection_id, SessionEvent.JOIN_GAME, payload)
    """

    def __init__(self):
        """Initialize router with empty handler registry."""
        self._handlers: Dict[SessionEvent, EventHandler] = {}

    def register_handler(self, event: SessionEvent, handler: EventHandler) -> None:
        """
        Register a handler for an event type.

        Args:
            event: The event type to handle
            handler: The handler instance
        """
        self._handlers[event] = handler
        logger.debug(f"Registered handler for {event.value}")

    def get_handler(self, event: SessionEvent) -> Optional[EventHandler]:
        """
        Get the handler for an event type.

        Returns:
            The handler if registered, None otherwise
        """
        return self._handlers.get(event)

    def route(
        self, connection_id: str, event: SessionEvent, payload: Any = None
    ) -> Optional[List[OutboundMessage]]:
        """
        Route an event to its handler.

        Args:
            connection_id: Connection that sent the event
            event: The event type
            payload: Raw payload from the envelope

        Returns:
            The handler's result, or None if no handler is registered
        """
        handler = self._handlers.get(event)

        if handler is None:
            logger.warning(f"No handler for event: {event.value}")
            return None

        return handler.handle(connection_id, payload)
