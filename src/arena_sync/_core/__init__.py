# Area: Core
"""
Core arena coordination.

Components:
- PlayerRegistry: connection id -> player record
- CollectibleController: the single shared collectible and its respawns
- ConnectionStateMachine: CONNECTING -> JOINED -> DISCONNECTED per connection
- EventRouter + handlers: one handler per inbound event
- SessionCoordinator: composes the above and returns scoped outbound messages
"""

from .enums import ConnectionState, SessionEvent, OutboundEvent, DeliveryScope
from .player import Player
from .registry import PlayerRegistry
from .collectible import (
    Collectible,
    CollectibleController,
    spawn,
    respawn,
    validate_play_area,
)
from .state_machine import ConnectionStateMachine
from .outbound import OutboundMessage, OutboundBuilder
from .event_router import EventRouter
from .coordinator import SessionCoordinator

__all__ = [
    "ConnectionState",
    "SessionEvent",
    "OutboundEvent",
    "DeliveryScope",
    "Player",
    "PlayerRegistry",
    "Collectible",
    "CollectibleController",
    "spawn",
    "respawn",
    "validate_play_area",
    "ConnectionStateMachine",
    "OutboundMessage",
    "OutboundBuilder",
    "EventRouter",
    "SessionCoordinator",
]
