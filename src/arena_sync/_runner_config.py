# Area: Shared
"""
arena_sync._runner_config — Runner Configuration
================================================

Settings model, loading and validation for ArenaRunner.

Settings are merged in this order (later wins):
    1. Model defaults
    2. JSON config file
    3. Environment variables (a local .env file is loaded first;
       ARENA_PORT wins over PORT)
    4. Explicit overrides (CLI flags)
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from ._core.collectible import validate_play_area
from ._core.enums import SessionEvent
from .errors import ConfigurationError
from .types import PlayField, SpriteSet

logger = logging.getLogger("arena_sync")

# Event names the runner forwards to the coordinator
INCOMING_EVENT_TYPES = {event.value for event in SessionEvent}

# Environment variable -> settings key
ENV_MAPPINGS = {
    "ARENA_HOST": "host",
    "ARENA_PORT": "port",
    "ARENA_LOG_FILE": "log_file",
    "ARENA_LOG_LEVEL": "log_level",
    "ARENA_COLLECTIBLE_VALUE": "collectible_value",
}

# Conventional variables honored when the ARENA_ form is unset
ENV_FALLBACKS = {
    "PORT": "port",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ArenaSettings(BaseModel):
    """Validated server settings."""
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    log_file: Optional[str] = "arena_sync.log"
    log_level: str = "INFO"
    collectible_value: int = Field(default=1, gt=0)
    play_field: PlayField = Field(default_factory=PlayField)
    collectible_sprite: SpriteSet = Field(default_factory=SpriteSet)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.INFO)


def load_settings(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ArenaSettings:
    """
    Load settings from file, environment and overrides.

    Args:
        config_path: Optional path to a JSON config file
        overrides: Values that take precedence over everything else

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If the file is unreadable or validation fails
    """
    load_dotenv()
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        try:
            with open(path, encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file is not valid JSON: {e}") from e
        if not isinstance(config, dict):
            raise ConfigurationError("Config file must contain a JSON object")

    for env_key, config_key in ENV_FALLBACKS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    if overrides:
        config.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = ArenaSettings.model_validate(config)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError("Invalid settings", validation_errors=errors) from e

    if settings.log_level.upper() not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level: {settings.log_level}",
            validation_errors=[f"log_level must be one of {', '.join(LOG_LEVELS)}"],
        )
    return settings


def validate_settings(settings: ArenaSettings) -> None:
    """
    Startup validation of the play area.

    Raises:
        InvalidPositionError: If no collectible position is usable
    """
    validate_play_area(settings.play_field, settings.collectible_sprite)


def is_incoming_event(message_type: str) -> bool:
    """Check if a message type is an inbound session event."""
    return message_type in INCOMING_EVENT_TYPES
