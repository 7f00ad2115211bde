"""
arena_sync.types — Wire and configuration schemas
=================================================

Pydantic models for everything that crosses the process boundary:
inbound client payloads and the play-area configuration.

Client payloads use camelCase keys (``spriteIndex``, ``isMoving``,
``collectibleId``); snake_case keys are accepted as well.

    >>> PlayerDraft.model_validate({"username": "ada", "spriteIndex": 2})
    PlayerDraft(id=None, username='ada', sprite_index=2, x=0.0, y=0.0, ...)
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for client payloads: camelCase aliases, unknown keys ignored,
    finite numbers only."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )


# ============================================
# Inbound payloads
# ============================================

class PlayerDraft(WireModel):
    """Payload of ``joinGame``: the initial attributes of a new player.

    Fields
    ------
    id : str, optional
        Client-side id. Ignored; the transport's connection id wins.
    username : str
        Display name shown to opponents.
    sprite_index : int
        Chosen avatar sprite.
    x, y : float
        Starting position.
    direction : str
        Facing direction, e.g. "left" or "right".
    is_moving : bool
        Whether the avatar is currently moving.
    """
    id: Optional[str] = None
    username: str = "Player"
    sprite_index: int = Field(default=0, ge=0)
    x: float = 0.0
    y: float = 0.0
    direction: str = "right"
    is_moving: bool = False


class PlayerStatePayload(WireModel):
    """Payload of ``playerStateChange`` and ``playerCollideWithCollectible``.

    Only the fields present in the payload are merged into the
    stored player. ``collectible_id`` is read by the collision handler
    to reject claims against an already-collected item.
    """
    id: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None
    direction: Optional[str] = None
    is_moving: Optional[bool] = None
    score: Optional[int] = Field(default=None, ge=0)
    collectible_id: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        """Return the player fields carried by this payload."""
        return self.model_dump(
            exclude_none=True,
            exclude={"id", "collectible_id"},
        )


# ============================================
# Play-area configuration
# ============================================

class PlayField(BaseModel):
    """Rectangle the collectible must stay inside, in canvas pixels."""

    model_config = ConfigDict(frozen=True)

    min_x: int = 0
    min_y: int = 0
    width: int = Field(default=640, gt=0)
    height: int = Field(default=480, gt=0)

    @property
    def max_x(self) -> int:
        return self.min_x + self.width

    @property
    def max_y(self) -> int:
        return self.min_y + self.height

    def bounds(self) -> Dict[str, int]:
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
        }


class SpriteSet(BaseModel):
    """Collectible sprite variants and their shared footprint."""

    model_config = ConfigDict(frozen=True)

    srcs: List[str] = Field(
        default_factory=lambda: [
            "/assets/bronze-coin.png",
            "/assets/silver-coin.png",
            "/assets/gold-coin.png",
        ],
        min_length=1,
    )
    width: int = Field(default=15, gt=0)
    height: int = Field(default=15, gt=0)

    @property
    def count(self) -> int:
        return len(self.srcs)
