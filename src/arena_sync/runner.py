# Area: Transport
"""
arena_sync.runner — WebSocket Runner
====================================

Serves the session coordinator over WebSockets.

Each socket gets a fresh connection id. Every text frame is parsed as
an envelope and handed to the coordinator; the returned messages are
delivered by scope once the coordinator call has returned. A closed
socket is reported to the coordinator as ``disconnect``.

All coordinator calls run on the asyncio event loop thread, one at a
time, so game state needs no locks.
"""

from __future__ import annotations
import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional

import websockets
from websockets.exceptions import ConnectionClosed

from ._core.coordinator import SessionCoordinator
from ._core.enums import DeliveryScope, SessionEvent
from ._core.outbound import OutboundMessage
from ._runner_config import ArenaSettings, is_incoming_event, validate_settings
from ._shared import generate_connection_id, parse_envelope, setup_logging

logger = logging.getLogger("arena_sync")


class ArenaRunner:
    """
    WebSocket transport around a SessionCoordinator.

    Usage:
        runner = ArenaRunner(settings)
        runner.run()  # blocks until interrupted
    """

    def __init__(
        self,
        settings: ArenaSettings,
        coordinator: Optional[SessionCoordinator] = None,
        configure_logging: bool = True,
    ):
        self.settings = settings

        if configure_logging:
            setup_logging(log_file_path=settings.log_file, level=settings.logging_level)

        # Raises InvalidPositionError on an unusable play area
        validate_settings(settings)

        self.coordinator = coordinator or SessionCoordinator.from_settings(settings)
        self._sockets: Dict[str, Any] = {}

    # ── Connection handling ──────────────────────────────────

    async def handle_connection(self, websocket) -> None:
        """Serve one client socket until it closes."""
        connection_id = generate_connection_id()
        self._sockets[connection_id] = websocket
        self.coordinator.open_connection(connection_id)
        logger.info(
            f"Client connected: {connection_id}", extra={"connection_id": connection_id}
        )

        try:
            async for raw in websocket:
                await self.handle_frame(connection_id, raw)
        except ConnectionClosed:
            logger.debug(
                f"Connection closed abruptly: {connection_id}",
                extra={"connection_id": connection_id},
            )
        finally:
            self._sockets.pop(connection_id, None)
            outgoing = self.coordinator.handle_event(
                connection_id, SessionEvent.DISCONNECT.value
            )
            await self.deliver(outgoing)
            logger.info(
                f"Client disconnected: {connection_id}",
                extra={"connection_id": connection_id},
            )

    async def handle_frame(self, connection_id: str, raw: Any) -> None:
        """Parse one frame, dispatch it and deliver the results."""
        envelope = parse_envelope(raw)
        if envelope is None:
            logger.warning(
                f"Dropping malformed frame from {connection_id}",
                extra={"connection_id": connection_id},
            )
            return

        message_type = envelope["message_type"]
        # disconnect is only ever produced by the transport
        if not is_incoming_event(message_type) or message_type == SessionEvent.DISCONNECT.value:
            logger.debug(
                f"Skipped (unknown type '{message_type}') from {connection_id}",
                extra={"connection_id": connection_id},
            )
            return

        outgoing = self.coordinator.handle_event(
            connection_id, message_type, envelope["payload"]
        )
        await self.deliver(outgoing)

    # ── Delivery ─────────────────────────────────────────────

    def recipients(self, message: OutboundMessage) -> List[str]:
        """Connection ids that should receive a message."""
        if message.scope == DeliveryScope.SENDER:
            return [message.origin] if message.origin in self._sockets else []
        if message.scope == DeliveryScope.OTHERS:
            return [cid for cid in self._sockets if cid != message.origin]
        return list(self._sockets)

    async def deliver(self, messages: Iterable[OutboundMessage]) -> None:
        """Send messages in order, skipping sockets that have gone away."""
        for message in messages:
            try:
                data = message.encode()
            except ValueError:
                logger.error(
                    f"Dropping {message.event.value}: payload is not valid JSON",
                    extra={"connection_id": message.origin},
                )
                continue
            for connection_id in self.recipients(message):
                websocket = self._sockets.get(connection_id)
                if websocket is None:
                    continue
                try:
                    await websocket.send(data)
                except ConnectionClosed:
                    logger.debug(
                        f"Skipped {message.event.value} to closed connection {connection_id}",
                        extra={"connection_id": connection_id},
                    )

    # ── Server lifecycle ─────────────────────────────────────

    def _log_startup(self) -> None:
        """Log startup information."""
        field = self.settings.play_field
        collectible = self.coordinator.collectibles.current
        logger.info("=" * 60)
        logger.info("  Arena Sync Server — Starting")
        logger.info(f"  Listen:      ws://{self.settings.host}:{self.settings.port}")
        logger.info(f"  Play field:  {field.width}x{field.height} at ({field.min_x}, {field.min_y})")
        logger.info(f"  Collectible: {collectible.position} value={collectible.value}")
        logger.info("=" * 60)

    async def serve(self) -> None:
        """Run the WebSocket server forever."""
        self._log_startup()
        async with websockets.serve(
            self.handle_connection, self.settings.host, self.settings.port
        ):
            await asyncio.Future()  # Run forever

    def run(self) -> None:
        """Start the server. Blocks until interrupted."""
        try:
            asyncio.run(self.serve())
        except KeyboardInterrupt:
            pass
        logger.info("Arena Sync Server stopped.")
