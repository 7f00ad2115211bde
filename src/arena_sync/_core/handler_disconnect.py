# Area: Core
"""
arena_sync._core.handler_disconnect — Disconnect Handler
========================================================

Handles ``disconnect``: removes the player and tells the opponents
which id left.
"""

import logging
from typing import Any, List, Optional

from .handler_base import BaseEventHandler
from .outbound import OutboundBuilder, OutboundMessage
from .registry import PlayerRegistry
from ..errors import PlayerNotFoundError

logger = logging.getLogger("arena_sync.core.handler.disconnect")


class DisconnectHandler(BaseEventHandler):
    """Handler for ``disconnect`` events. The payload is ignored."""

    def __init__(self, registry: PlayerRegistry, builder: OutboundBuilder):
        self.registry = registry
        self.builder = builder

    def handle(self, connection_id: str, payload: Any) -> Optional[List[OutboundMessage]]:
        self.log_handling("disconnect", connection_id)

        try:
            player = self.registry.leave(connection_id)
        except PlayerNotFoundError:
            logger.debug("Disconnect from %s without a player record", connection_id)
            return None

        return [self.builder.opponent_leave(connection_id, player.id)]
