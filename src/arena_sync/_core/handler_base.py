# Area: Core
"""
arena_sync._core.handler_base — Base Event Handler
==================================================

Abstract base class for inbound session event handlers.
Provides payload validation and logging helpers.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .outbound import OutboundMessage

logger = logging.getLogger("arena_sync.core.handler")

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseEventHandler(ABC):
    """
    Abstract base class for session event handlers.

    ``handle`` returns the outbound messages for an accepted event,
    or None when the event was dropped (invalid payload, stale
    connection). The coordinator only advances the connection's
    state machine for accepted events.
    """

    @abstractmethod
    def handle(self, connection_id: str, payload: Any) -> Optional[List[OutboundMessage]]:
        """
        Handle one inbound event.

        Args:
            connection_id: Connection that sent the event
            payload: Raw JSON payload from the envelope

        Returns:
            Outbound messages, or None if the event was dropped
        """
        pass

    def parse_payload(
        self, model: Type[ModelT], payload: Any, connection_id: str
    ) -> Optional[ModelT]:
        """
        Validate a raw payload against a wire model.

        Args:
            model: Pydantic model class to validate with
            payload: Raw payload (None is treated as an empty object)
            connection_id: Sender, for logging

        Returns:
            The validated model, or None if validation failed
        """
        if payload is None:
            payload = {}
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.warning(
                "Dropping invalid %s payload from %s: %s",
                model.__name__, connection_id, e.errors(include_url=False),
                extra={"connection_id": connection_id},
            )
            return None

    def log_handling(self, event_name: str, connection_id: str) -> None:
        """Log that an event is being handled."""
        logger.debug(
            f"Handling {event_name} from {connection_id}",
            extra={"connection_id": connection_id},
        )
