"""
arena_sync — Real-time state server for a browser arena game
============================================================

Tracks connected players, owns the single shared collectible and
tells every client what changed.

Quick Start:
    from arena_sync import ArenaRunner, load_settings
    runner = ArenaRunner(load_settings("arena.json"))
    runner.run()

Embedding the core without a socket server:
    from arena_sync import SessionCoordinator, PlayField, SpriteSet
    coordinator = SessionCoordinator(PlayField(), SpriteSet())
    messages = coordinator.handle_event("conn-1", "joinGame", {"username": "ada"})
    for message in messages:
        ...  # deliver message.encode() according to message.scope

Inbound events:  joinGame, playerStateChange, playerCollideWithCollectible,
                 disconnect
Outbound events: currentOpponents, collectible, newOpponent,
                 opponentStateChange, scored, opponentLeave
"""

from ._core import (
    SessionCoordinator,
    PlayerRegistry,
    CollectibleController,
    Collectible,
    Player,
    OutboundMessage,
    DeliveryScope,
    OutboundEvent,
    SessionEvent,
    ConnectionState,
)
from ._runner_config import ArenaSettings, load_settings
from .runner import ArenaRunner
from .errors import (
    ArenaSyncError,
    PlayerNotFoundError,
    InvalidPositionError,
    ConfigurationError,
    InvalidTransitionError,
)
from .types import (
    PlayerDraft,
    PlayerStatePayload,
    PlayField,
    SpriteSet,
)

__all__ = [
    # Main classes
    "SessionCoordinator",
    "ArenaRunner",
    "ArenaSettings",
    "load_settings",
    # State
    "PlayerRegistry",
    "CollectibleController",
    "Collectible",
    "Player",
    # Messages
    "OutboundMessage",
    "DeliveryScope",
    "OutboundEvent",
    "SessionEvent",
    "ConnectionState",
    # Errors
    "ArenaSyncError",
    "PlayerNotFoundError",
    "InvalidPositionError",
    "ConfigurationError",
    "InvalidTransitionError",
    # Wire / config types
    "PlayerDraft",
    "PlayerStatePayload",
    "PlayField",
    "SpriteSet",
]
__version__ = "1.0.0"
