# Area: Core
"""
arena_sync._core.state_machine — Connection State Machine
=========================================================

Tracks one connection's lifecycle. The coordinator consults it
before routing an event so that events arriving in the wrong state
are dropped instead of touching shared state.
"""

import logging
from .enums import ConnectionState, SessionEvent
from ..errors import InvalidTransitionError

logger = logging.getLogger("arena_sync.core.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    ConnectionState.CONNECTING: {
        SessionEvent.JOIN_GAME: ConnectionState.JOINED,
        SessionEvent.DISCONNECT: ConnectionState.DISCONNECTED,
    },
    ConnectionState.JOINED: {
        SessionEvent.JOIN_GAME: ConnectionState.JOINED,
        SessionEvent.PLAYER_STATE_CHANGE: ConnectionState.JOINED,
        SessionEvent.PLAYER_COLLIDE: ConnectionState.JOINED,
        SessionEvent.DISCONNECT: ConnectionState.DISCONNECTED,
    },
    ConnectionState.DISCONNECTED: {},
}


class ConnectionStateMachine:
    """
    State machine for a single connection.

    Attributes:
        connection_id: Transport-assigned id of the connection
        current_state: The current state of the connection
    """

    def __init__(self, connection_id: str):
        """Initialize state machine in CONNECTING."""
        self.connection_id = connection_id
        self.current_state = ConnectionState.CONNECTING

    @property
    def is_joined(self) -> bool:
        return self.current_state == ConnectionState.JOINED

    @property
    def is_closed(self) -> bool:
        return self.current_state == ConnectionState.DISCONNECTED

    def can_transition(self, event: SessionEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: SessionEvent) -> ConnectionState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            InvalidTransitionError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise InvalidTransitionError(
                self.connection_id, self.current_state.value, event.value
            )

        next_state = TRANSITIONS[self.current_state][event]
        if next_state != self.current_state:
            logger.debug(
                f"[{self.connection_id}] {self.current_state.value} → {next_state.value}"
            )
        self.current_state = next_state
        return next_state
