# Area: Core
"""
arena_sync._core.registry — Player Registry
===========================================

Maps connection ids to player records. The registry owns the
canonical records; ``all()`` hands out copies so no other component
holds a second mutable reference.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

from .player import Player
from ..errors import PlayerNotFoundError
from ..types import PlayerDraft

logger = logging.getLogger("arena_sync.core.registry")

# Fields a client may change after joining
UPDATABLE_FIELDS = ("x", "y", "direction", "is_moving", "score")


class PlayerRegistry:
    """
    In-memory player store keyed by connection id.

    All methods run on the single dispatch thread, so each one is a
    complete read-modify-write on the underlying dict.
    """

    def __init__(self) -> None:
        self._players: Dict[str, Player] = {}

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._players

    def join(self, connection_id: str, draft: PlayerDraft) -> Player:
        """
        Register a player for a connection.

        A second join under the same id replaces the first record but
        keeps its score.

        Args:
            connection_id: Transport-assigned connection id
            draft: Initial attributes sent by the client

        Returns:
            The stored player record
        """
        if draft.id and draft.id != connection_id:
            logger.warning(
                "Join payload id %s ignored, using connection id %s",
                draft.id, connection_id,
            )
        score = 0
        previous = self._players.get(connection_id)
        if previous is not None:
            logger.info("Connection %s joined again, replacing record", connection_id)
            score = previous.score

        player = Player(
            id=connection_id,
            username=draft.username,
            sprite_index=draft.sprite_index,
            x=draft.x,
            y=draft.y,
            direction=draft.direction,
            is_moving=draft.is_moving,
            score=score,
        )
        self._players[connection_id] = player
        logger.info("Player %s (%s) joined", player.username, connection_id)
        return player

    def get(self, connection_id: str) -> Player:
        """
        Return the stored record for a connection.

        Raises:
            PlayerNotFoundError: If no player is registered for the id
        """
        player = self._players.get(connection_id)
        if player is None:
            raise PlayerNotFoundError(connection_id, "get")
        return player

    def update_state(self, connection_id: str, changes: Dict[str, Any]) -> Player:
        """
        Merge position/orientation/score changes into a stored record.

        Unknown keys are ignored. A score lower than the stored one is
        ignored so scores never decrease within a session.

        Args:
            connection_id: Connection whose player changed
            changes: Field name -> new value

        Returns:
            The updated player record

        Raises:
            PlayerNotFoundError: If no player is registered for the id
        """
        player = self._players.get(connection_id)
        if player is None:
            raise PlayerNotFoundError(connection_id, "update_state")

        for field_name in UPDATABLE_FIELDS:
            if field_name not in changes:
                continue
            value = changes[field_name]
            if field_name == "score" and value < player.score:
                logger.warning(
                    "Ignoring score decrease for %s: %s -> %s",
                    connection_id, player.score, value,
                )
                continue
            setattr(player, field_name, value)

        return player

    def leave(self, connection_id: str) -> Player:
        """
        Remove and return a player record.

        Raises:
            PlayerNotFoundError: If no player is registered for the id
        """
        player = self._players.pop(connection_id, None)
        if player is None:
            raise PlayerNotFoundError(connection_id, "leave")
        logger.info("Player %s (%s) left", player.username, connection_id)
        return player

    def all(self, exclude: Optional[str] = None) -> List[Player]:
        """
        Snapshot of every registered player.

        Args:
            exclude: Connection id to leave out (e.g. the joining client)

        Returns:
            Copies of the stored records
        """
        return [
            replace(player)
            for connection_id, player in self._players.items()
            if connection_id != exclude
        ]
