# Area: Core
"""
arena_sync._core.handler_collide — Collectible Collision Handler
================================================================

Handles ``playerCollideWithCollectible``: awards the collectible's
value to the sender, respawns the collectible and tells everybody.

Scoring uses the server-side score, not the one in the payload.
A payload that names an older ``collectibleId`` is a late or
repeated claim and is dropped; payloads without it are always
honored.
"""

import logging
from typing import Any, List, Optional

from .collectible import CollectibleController
from .enums import DeliveryScope
from .handler_base import BaseEventHandler
from .outbound import OutboundBuilder, OutboundMessage
from .registry import PlayerRegistry
from ..errors import PlayerNotFoundError
from ..types import PlayerStatePayload

logger = logging.getLogger("arena_sync.core.handler.collide")


class PlayerCollideHandler(BaseEventHandler):
    """
    Handler for ``playerCollideWithCollectible`` events.

    1. Add the collectible's value to the stored score
    2. Respawn the collectible away from its current position
    3. Send the new score to the sender
    4. Send the updated player to everyone else
    5. Send the new collectible to everyone
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
        self.log_handling("playerCollideWithCollectible", connection_id)

        state = self.parse_payload(PlayerStatePayload, payload, connection_id)
        if state is None:
            return None

        collected = self.collectibles.current
        if state.collectible_id is not None and state.collectible_id != collected.id:
            logger.info(
                "Stale collectible claim from %s (%s, current %s)",
                connection_id, state.collectible_id, collected.id,
            )
            return None

        try:
            stored = self.registry.get(connection_id)
        except PlayerNotFoundError:
            logger.debug("Stale collision from %s dropped", connection_id)
            return None

        changes = state.changes()
        changes["score"] = stored.score + collected.value
        player = self.registry.update_state(connection_id, changes)

        new_collectible = self.collectibles.respawn(exclude_position=collected.position)

        logger.info(
            "Player %s scored %d (total %d)",
            connection_id, collected.value, player.score,
        )
        return [
            self.builder.scored(connection_id, player.score),
            self.builder.opponent_state_change(connection_id, player),
            self.builder.collectible(connection_id, new_collectible, scope=DeliveryScope.ALL),
        ]
