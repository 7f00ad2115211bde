# Area: Core
"""
arena_sync._core.outbound — Outbound Message Builder
====================================================

Builds the messages the coordinator hands back to the transport.
Each message names its event, its payload and its delivery scope
relative to the connection that triggered it.
"""

from dataclasses import dataclass
from typing import Any, List

from .collectible import Collectible
from .enums import DeliveryScope, OutboundEvent
from .player import Player
from .._shared.protocol import encode_envelope


@dataclass(frozen=True)
class OutboundMessage:
    """
    One message to deliver.

    Attributes:
        event: Outbound event name
        payload: JSON-serializable payload
        scope: Who receives it, relative to ``origin``
        origin: Connection id that triggered the message
    """

    event: OutboundEvent
    payload: Any
    scope: DeliveryScope
    origin: str

    def encode(self) -> str:
        """Serialize to a wire frame. Raises ValueError on NaN or Infinity."""
        return encode_envelope(self.event.value, self.payload)


class OutboundBuilder:
    """
    Builds outbound messages with the scope each event is sent with.

    current_opponents, scored     -> SENDER
    new_opponent, opponent_*      -> OTHERS
    collectible                   -> SENDER on join, ALL on respawn
    """

    def current_opponents(self, origin: str, roster: List[Player]) -> OutboundMessage:
        return OutboundMessage(
            event=OutboundEvent.CURRENT_OPPONENTS,
            payload=[player.to_dict() for player in roster],
            scope=DeliveryScope.SENDER,
            origin=origin,
        )

    def collectible(
        self,
        origin: str,
        collectible: Collectible,
        scope: DeliveryScope = DeliveryScope.SENDER,
    ) -> OutboundMessage:
        return OutboundMessage(
            event=OutboundEvent.COLLECTIBLE,
            payload=collectible.to_dict(),
            scope=scope,
            origin=origin,
        )

    def new_opponent(self, origin: str, player: Player) -> OutboundMessage:
        return OutboundMessage(
            event=OutboundEvent.NEW_OPPONENT,
            payload=player.to_dict(),
            scope=DeliveryScope.OTHERS,
            origin=origin,
        )

    def opponent_state_change(self, origin: str, player: Player) -> OutboundMessage:
        return OutboundMessage(
            event=OutboundEvent.OPPONENT_STATE_CHANGE,
            payload=player.to_dict(),
            scope=DeliveryScope.OTHERS,
            origin=origin,
        )

    def scored(self, origin: str, score: int) -> OutboundMessage:
        return OutboundMessage(
            event=OutboundEvent.SCORED,
            payload=score,
            scope=DeliveryScope.SENDER,
            origin=origin,
        )

    def opponent_leave(self, origin: str, connection_id: str) -> OutboundMessage:
        return OutboundMessage(
            event=OutboundEvent.OPPONENT_LEAVE,
            payload=connection_id,
            scope=DeliveryScope.OTHERS,
            origin=origin,
        )
