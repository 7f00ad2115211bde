# Area: Shared
"""
arena_sync.errors — Custom exception classes
=============================================

Defines the exception hierarchy for the arena coordinator.
Errors that can stop the process carry enough context to render
a structured error block for the terminal and the log file.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
import json


class ArenaSyncError(Exception):
    """Base exception for all arena_sync package errors."""
    pass


class PlayerNotFoundError(ArenaSyncError):
    """Raised when a registry operation references an unknown connection id.

    Callers treat this as a stale message: it is logged and dropped,
    never fatal.
    """

    def __init__(self, connection_id: str, operation: str):
        self.connection_id = connection_id
        self.operation = operation
        super().__init__(
            f"No player registered for connection '{connection_id}' ({operation})"
        )


class InvalidPositionError(ArenaSyncError):
    """Raised when a position falls outside the playable area.

    Only a broken play field / sprite configuration can trigger this,
    so it is fatal at startup validation.
    """

    def __init__(
        self,
        reason: str,
        position: Optional[Tuple[int, int]] = None,
        bounds: Optional[Dict[str, Any]] = None,
    ):
        self.reason = reason
        self.position = position
        self.bounds = bounds or {}
        super().__init__(f"Invalid collectible position: {reason}")

    def format_error_log(self) -> str:
        details: Dict[str, Any] = {"reason": self.reason, "bounds": self.bounds}
        if self.position is not None:
            details["position"] = list(self.position)
        return _format_error_block(
            error_type="INVALID_POSITION",
            details=details,
            validation_errors=None,
        )


class ConfigurationError(ArenaSyncError):
    """Raised when settings cannot be loaded or fail validation."""

    def __init__(self, message: str, validation_errors: Optional[List[str]] = None):
        self.validation_errors = validation_errors or []
        super().__init__(message)

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="CONFIGURATION_ERROR",
            details={"message": str(self)},
            validation_errors=self.validation_errors,
        )


class InvalidTransitionError(ArenaSyncError, ValueError):
    """Raised when a connection receives an event its state does not accept."""

    def __init__(self, connection_id: str, state: str, event: str):
        self.connection_id = connection_id
        self.state = state
        self.event = event
        super().__init__(
            f"Invalid transition for '{connection_id}': {event} from {state}"
        )


def _format_error_block(
    error_type: str,
    details: Dict[str, Any],
    validation_errors: Optional[List[str]],
) -> str:
    """Format a structured error block for terminal and file output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " ARENA SERVER ERROR — PROCESS TERMINATED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        "",
        " ── DETAILS " + "─" * 52,
        _indent_json(details),
    ]

    if validation_errors:
        lines.append("")
        lines.append(" ── VALIDATION ERRORS " + "─" * 42)
        for error in validation_errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
