# Area: Core
"""Player record held by the registry."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Player:
    """One connected player. ``id`` is the transport connection id."""
    id: str
    username: str = "Player"
    sprite_index: int = 0
    x: float = 0.0
    y: float = 0.0
    direction: str = "right"
    is_moving: bool = False
    score: int = 0

    @property
    def position(self):
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "spriteIndex": self.sprite_index,
            "x": self.x,
            "y": self.y,
            "direction": self.direction,
            "isMoving": self.is_moving,
            "score": self.score,
        }
