# Area: Core
"""
arena_sync._core.enums — Session Enums
======================================

Defines connection states, inbound session events, outbound event
names and delivery scopes used by the session coordinator.
"""

from enum import Enum


class ConnectionState(Enum):
    """
    States of one client connection.

    State transitions:
    CONNECTING -> JOINED (on JOIN_GAME)
    CONNECTING -> DISCONNECTED (on DISCONNECT, nothing broadcast)
    JOINED -> JOINED (on JOIN_GAME, PLAYER_STATE_CHANGE, PLAYER_COLLIDE)
    JOINED -> DISCONNECTED (on DISCONNECT)
    DISCONNECTED is terminal.
    """
    CONNECTING = "CONNECTING"
    JOINED = "JOINED"
    DISCONNECTED = "DISCONNECTED"


class SessionEvent(Enum):
    """
    Inbound events delivered by the transport, keyed by wire name.

    - JOIN_GAME: client submits its initial player draft
    - PLAYER_STATE_CHANGE: client moved or turned
    - PLAYER_COLLIDE: client reports touching the collectible
    - DISCONNECT: socket closed
    """
    JOIN_GAME = "joinGame"
    PLAYER_STATE_CHANGE = "playerStateChange"
    PLAYER_COLLIDE = "playerCollideWithCollectible"
    DISCONNECT = "disconnect"


class OutboundEvent(Enum):
    """Outbound event names sent to clients."""
    CURRENT_OPPONENTS = "currentOpponents"
    COLLECTIBLE = "collectible"
    NEW_OPPONENT = "newOpponent"
    OPPONENT_STATE_CHANGE = "opponentStateChange"
    SCORED = "scored"
    OPPONENT_LEAVE = "opponentLeave"


class DeliveryScope(Enum):
    """Which connections receive an outbound message."""
    SENDER = "SENDER"   # only the connection that sent the inbound event
    OTHERS = "OTHERS"   # every connection except the sender
    ALL = "ALL"         # every connection including the sender
