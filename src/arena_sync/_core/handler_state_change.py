# Area: Core
"""
arena_sync._core.handler_state_change — Player State Change Handler
===================================================================

Handles ``playerStateChange``: merges the reported position and
orientation into the stored player and relays it to the opponents.
"""

import logging
from typing import Any, List, Optional

from .handler_base import BaseEventHandler
from .outbound import OutboundBuilder, OutboundMessage
from .registry import PlayerRegistry
from ..errors import PlayerNotFoundError
from ..types import PlayerStatePayload

logger = logging.getLogger("arena_sync.core.handler.state_change")


class PlayerStateChangeHandler(BaseEventHandler):
    """Handler for ``playerStateChange`` events."""

    def __init__(self, registry: PlayerRegistry, builder: OutboundBuilder):
        self.registry = registry
        self.builder = builder

    def handle(self, connection_id: str, payload: Any) -> Optional[List[OutboundMessage]]:
        self.log_handling("playerStateChange", connection_id)

        state = self.parse_payload(PlayerStatePayload, payload, connection_id)
        if state is None:
            return None

        try:
            player = self.registry.update_state(connection_id, state.changes())
        except PlayerNotFoundError:
            logger.debug("Stale state change from %s dropped", connection_id)
            return None

        return [self.builder.opponent_state_change(connection_id, player)]
