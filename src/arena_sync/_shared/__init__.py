# Area: Shared
"""
Shared utilities used by the core and the runner.

Components:
- logging_config: Terminal + JSON file logging, fatal error output
- protocol: Wire envelope helpers and id generation
"""

from .logging_config import (
    setup_logging,
    log_and_terminate,
)
from .protocol import (
    generate_connection_id,
    generate_collectible_id,
    encode_envelope,
    parse_envelope,
)

__all__ = [
    "setup_logging",
    "log_and_terminate",
    "generate_connection_id",
    "generate_collectible_id",
    "encode_envelope",
    "parse_envelope",
]
