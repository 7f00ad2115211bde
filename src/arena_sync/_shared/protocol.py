# Area: Shared
"""
arena_sync._shared.protocol — Wire envelope helpers
===================================================

Every WebSocket text frame carries one JSON envelope:

    {"message_type": "<event name>", "payload": <any JSON value>}

This module builds and parses envelopes and generates the opaque
identifiers used for connections and collectibles.
"""

import json
import logging
import uuid
from typing import Any, Dict, Optional

logger = logging.getLogger("arena_sync.protocol")


def generate_connection_id() -> str:
    """Generate a unique connection id."""
    return uuid.uuid4().hex


def generate_collectible_id() -> str:
    """Generate a unique collectible identity token."""
    return uuid.uuid4().hex[:21]


def build_envelope(message_type: str, payload: Any = None) -> Dict[str, Any]:
    """Build an outbound envelope dict."""
    return {"message_type": message_type, "payload": payload}


def encode_envelope(message_type: str, payload: Any = None) -> str:
    """
    Build and serialize an envelope to a JSON string.

    Raises:
        ValueError: If the payload holds NaN or Infinity
    """
    return json.dumps(build_envelope(message_type, payload), allow_nan=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-JSON constant {name}")


def parse_envelope(raw: Any) -> Optional[Dict[str, Any]]:
    """
    Parse an inbound frame into an envelope.

    Args:
        raw: Text (or bytes) frame received from a client

    Returns:
        Envelope dict with 'message_type' and 'payload', or None if the
        frame is not a strict JSON object (no NaN or Infinity) with a
        string message_type
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            return None
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except (TypeError, ValueError):
        return None

    if not isinstance(data, dict):
        return None
    message_type = data.get("message_type")
    if not isinstance(message_type, str) or not message_type:
        return None

    return {"message_type": message_type, "payload": data.get("payload")}
