# Area: Core
"""
arena_sync._core.handler_join — Join Game Handler
=================================================

Handles ``joinGame``. The joining client receives the players that
were already in the arena and the current collectible; everyone
else learns about the new player.
"""

import logging
from typing import Any, List, Optional

from .collectible import CollectibleController
from .handler_base import BaseEventHandler
from .outbound import OutboundBuilder, OutboundMessage
from .registry import PlayerRegistry
from ..types import PlayerDraft

logger = logging.getLogger("arena_sync.core.handler.join")


class JoinGameHandler(BaseEventHandler):
    """
    Handler for ``joinGame`` events.

    1. Register the player under the connection id
    2. Send the roster of other players to the sender
    3. Send the current collectible to the sender
    4. Announce the new player to everyone else
    """

    def __init__(
        self,
        registry: PlayerRegistry,
        collectibles: CollectibleController,
        builder: OutboundBuilder,
    ):
        self.registry = registry
        self.collectibles = collectibles
        self.builder = builder

    def handle(self, connection_id: str, payload: Any) -> Optional[List[OutboundMessage]]:
        self.log_handling("joinGame", connection_id)

        draft = self.parse_payload(PlayerDraft, payload, connection_id)
        if draft is None:
            return None

        player = self.registry.join(connection_id, draft)
        roster = self.registry.all(exclude=connection_id)

        logger.info(
            "Sending %d opponent(s) to %s", len(roster), connection_id
        )
        return [
            self.builder.current_opponents(connection_id, roster),
            self.builder.collectible(connection_id, self.collectibles.current),
            self.builder.new_opponent(connection_id, player),
        ]
