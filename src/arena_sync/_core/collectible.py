# Area: Core
"""
arena_sync._core.collectible — Collectible Controller
=====================================================

Owns the single shared collectible. Every spawn or respawn produces
a new frozen ``Collectible`` snapshot that replaces the previous one
in one assignment, so readers see either the old item or the new
one and never a mix of both.

Positions are integer canvas coordinates of the sprite's top-left
corner, sampled uniformly from the play field shrunk by the sprite
footprint.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from ..errors import InvalidPositionError
from ..types import PlayField, SpriteSet
from .._shared.protocol import generate_collectible_id

logger = logging.getLogger("arena_sync.core.collectible")

Position = Tuple[int, int]
IdFactory = Callable[[], str]


@dataclass(frozen=True)
class Collectible:
    """
    Immutable snapshot of the collectible.

    Attributes:
        id: Identity token, unique per spawn
        x: Left edge in canvas pixels
        y: Top edge in canvas pixels
        sprite_index: Index into the sprite set's srcs
        value: Points awarded on collection
    """

    id: str
    x: int
    y: int
    sprite_index: int
    value: int = 1

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "spriteSrcIndex": self.sprite_index,
            "value": self.value,
        }


def validate_play_area(field: PlayField, sprite_set: SpriteSet) -> None:
    """
    Check that a collectible fits the field with room to move.

    Respawn resamples until the position changes, so at least two
    distinct positions must exist for it to terminate.

    Raises:
        InvalidPositionError: If the footprint does not fit or the
            field offers fewer than two positions
    """
    free_x = field.width - sprite_set.width
    free_y = field.height - sprite_set.height
    if free_x < 0 or free_y < 0:
        raise InvalidPositionError(
            f"sprite footprint {sprite_set.width}x{sprite_set.height} "
            f"does not fit play field {field.width}x{field.height}",
            bounds=field.bounds(),
        )
    if (free_x + 1) * (free_y + 1) < 2:
        raise InvalidPositionError(
            "play field leaves a single collectible position, respawn cannot move it",
            bounds=field.bounds(),
        )


def _check_in_bounds(position: Position, field: PlayField, sprite_set: SpriteSet) -> None:
    x, y = position
    if not (field.min_x <= x <= field.max_x - sprite_set.width
            and field.min_y <= y <= field.max_y - sprite_set.height):
        raise InvalidPositionError(
            "computed position outside play field",
            position=position,
            bounds=field.bounds(),
        )


def random_position(
    field: PlayField, sprite_set: SpriteSet, rng: random.Random
) -> Position:
    """Pick a uniform random position that keeps the sprite inside the field."""
    x = rng.randint(field.min_x, field.max_x - sprite_set.width)
    y = rng.randint(field.min_y, field.max_y - sprite_set.height)
    position = (x, y)
    _check_in_bounds(position, field, sprite_set)
    return position


def spawn(
    field: PlayField,
    sprite_set: SpriteSet,
    value: int = 1,
    rng: Optional[random.Random] = None,
    id_factory: IdFactory = generate_collectible_id,
) -> Collectible:
    """
    Create the initial collectible.

    Position and sprite are random; the id is fresh.
    """
    rng = rng or random.Random()
    x, y = random_position(field, sprite_set, rng)
    return Collectible(
        id=id_factory(),
        x=x,
        y=y,
        sprite_index=rng.randrange(sprite_set.count),
        value=value,
    )


def respawn(
    previous: Collectible,
    field: PlayField,
    sprite_set: SpriteSet,
    exclude_position: Optional[Position] = None,
    rng: Optional[random.Random] = None,
    id_factory: IdFactory = generate_collectible_id,
) -> Collectible:
    """
    Build the collectible that replaces ``previous`` after a collection.

    The position is resampled until it differs from ``exclude_position``
    (defaults to the previous position). The sprite index advances
    cyclically and the id is regenerated until it differs from the
    previous one. The value is carried over.
    """
    rng = rng or random.Random()
    excluded = exclude_position if exclude_position is not None else previous.position

    position = random_position(field, sprite_set, rng)
    while position == excluded:
        position = random_position(field, sprite_set, rng)

    new_id = id_factory()
    while new_id == previous.id:
        new_id = id_factory()

    return Collectible(
        id=new_id,
        x=position[0],
        y=position[1],
        sprite_index=(previous.sprite_index + 1) % sprite_set.count,
        value=previous.value,
    )


class CollectibleController:
    """
    Holder of the current collectible snapshot.

    Usage:
        controller = CollectibleController(field, sprite_set, value=1)
        current = controller.current
        new = controller.respawn(exclude_position=current.position)
    """

    def __init__(
        self,
        field: PlayField,
        sprite_set: SpriteSet,
        value: int = 1,
        rng: Optional[random.Random] = None,
        id_factory: IdFactory = generate_collectible_id,
        initial: Optional[Collectible] = None,
    ):
        """
        Validate the play area and spawn the first collectible.

        Args:
            field: Play field bounds
            sprite_set: Collectible sprites and footprint
            value: Points per collection
            rng: Random source (injectable for tests)
            id_factory: Callable producing identity tokens
            initial: Start from this snapshot instead of spawning one

        Raises:
            InvalidPositionError: If the play area is unusable
        """
        validate_play_area(field, sprite_set)
        self.field = field
        self.sprite_set = sprite_set
        self._rng = rng or random.Random()
        self._id_factory = id_factory
        self.respawn_count = 0

        if initial is not None:
            _check_in_bounds(initial.position, field, sprite_set)
            self._current = initial
        else:
            self._current = self.spawn(value)

    @property
    def current(self) -> Collectible:
        """The current collectible snapshot."""
        return self._current

    def spawn(self, value: Optional[int] = None) -> Collectible:
        """Replace the collectible with a freshly spawned one."""
        if value is None:
            value = self._current.value
        self._current = spawn(
            self.field, self.sprite_set, value=value,
            rng=self._rng, id_factory=self._id_factory,
        )
        logger.info(
            "Collectible spawned at %s (sprite %d)",
            self._current.position, self._current.sprite_index,
        )
        return self._current

    def respawn(self, exclude_position: Optional[Position] = None) -> Collectible:
        """Replace the collectible after it was collected and return the new one."""
        self._current = respawn(
            self._current, self.field, self.sprite_set,
            exclude_position=exclude_position,
            rng=self._rng, id_factory=self._id_factory,
        )
        self.respawn_count += 1
        logger.info(
            "Collectible respawned at %s (sprite %d)",
            self._current.position, self._current.sprite_index,
        )
        return self._current
