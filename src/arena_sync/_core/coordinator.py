# Area: Core
"""Session coordinator — owns the arena state and dispatches client events."""
import logging
import random
from typing import Any, Dict, List, Optional

from .collectible import Collectible, CollectibleController, IdFactory
from .enums import ConnectionState, SessionEvent
from .event_router import EventRouter
from .handler_collide import PlayerCollideHandler
from .handler_disconnect import DisconnectHandler
from .handler_join import JoinGameHandler
from .handler_state_change import PlayerStateChangeHandler
from .outbound import OutboundBuilder, OutboundMessage
from .registry import PlayerRegistry
from .state_machine import ConnectionStateMachine
from .._shared.protocol import generate_collectible_id
from ..types import PlayField, SpriteSet

logger = logging.getLogger("arena_sync.core.coordinator")


class SessionCoordinator:
    """
    Authoritative arena state for one server process.

    Holds the player registry, the collectible controller and one
    state machine per open connection. ``handle_event`` runs each
    event to completion and returns the messages to deliver; it never
    performs I/O, so the transport sends only after state is final.
    """

    def __init__(
        self,
        play_field: PlayField,
        sprite_set: SpriteSet,
        collectible_value: int = 1,
        rng: Optional[random.Random] = None,
        id_factory: IdFactory = generate_collectible_id,
        initial_collectible: Optional[Collectible] = None,
    ):
        self.registry = PlayerRegistry()
        self.collectibles = CollectibleController(
            play_field, sprite_set, value=collectible_value,
            rng=rng, id_factory=id_factory, initial=initial_collectible,
        )
        self.builder = OutboundBuilder()
        self.router = EventRouter()
        self._connections: Dict[str, ConnectionStateMachine] = {}
        self._register_handlers()

    @classmethod
    def from_settings(cls, settings) -> "SessionCoordinator":
        """Build a coordinator from validated ``ArenaSettings``."""
        return cls(
            play_field=settings.play_field,
            sprite_set=settings.collectible_sprite,
            collectible_value=settings.collectible_value,
        )

    def _register_handlers(self) -> None:
        reg = self.router.register_handler
        reg(SessionEvent.JOIN_GAME, JoinGameHandler(self.registry, self.collectibles, self.builder))
        reg(SessionEvent.PLAYER_STATE_CHANGE, PlayerStateChangeHandler(self.registry, self.builder))
        reg(SessionEvent.PLAYER_COLLIDE, PlayerCollideHandler(self.registry, self.collectibles, self.builder))
        reg(SessionEvent.DISCONNECT, DisconnectHandler(self.registry, self.builder))

    def open_connection(self, connection_id: str) -> ConnectionStateMachine:
        """Start tracking a new connection in CONNECTING."""
        machine = self._connections.get(connection_id)
        if machine is None:
            machine = self._connections[connection_id] = ConnectionStateMachine(connection_id)
            logger.debug("Connection opened: %s", connection_id)
        return machine

    def connection_state(self, connection_id: str) -> Optional[ConnectionState]:
        machine = self._connections.get(connection_id)
        return machine.current_state if machine else None

    def handle_event(
        self, connection_id: str, message_type: str, payload: Any = None
    ) -> List[OutboundMessage]:
        """
        Process one inbound event from a connection.

        Events of unknown type, events the connection's state does not
        accept and events the handler drops produce no messages.
        """
        try:
            event = SessionEvent(message_type)
        except ValueError:
            logger.warning("Unknown event '%s' from %s", message_type, connection_id)
            return []

        machine = self._connections.get(connection_id)
        if machine is None:
            if event is not SessionEvent.JOIN_GAME:
                logger.debug("Dropping %s from unknown connection %s", event.value, connection_id)
                return []
            machine = self.open_connection(connection_id)

        if not machine.can_transition(event):
            logger.debug(
                "Dropping %s from %s in state %s",
                event.value, connection_id, machine.current_state.value,
            )
            return []

        if event is SessionEvent.DISCONNECT and not machine.is_joined:
            self._close(machine, event)
            return []

        outgoing = self.router.route(connection_id, event, payload)

        if event is SessionEvent.DISCONNECT:
            self._close(machine, event)
            return outgoing or []

        if outgoing is None:
            return []
        machine.transition(event)
        return outgoing

    def _close(self, machine: ConnectionStateMachine, event: SessionEvent) -> None:
        machine.transition(event)
        self._connections.pop(machine.connection_id, None)
        logger.debug("Connection closed: %s", machine.connection_id)

    @property
    def open_connections(self) -> List[str]:
        return list(self._connections)
