# Area: Shared Tests
"""Tests for wire and configuration schemas."""

import pytest
from pydantic import ValidationError

from arena_sync.types import PlayerDraft, PlayerStatePayload, PlayField, SpriteSet


class TestPlayerDraft:
    """Tests for the joinGame payload model."""

    def test_accepts_camel_case(self):
        draft = PlayerDraft.model_validate({"username": "ada", "spriteIndex": 2, "isMoving": True})
        assert draft.sprite_index == 2
        assert draft.is_moving is True

    def test_accepts_snake_case(self):
        draft = PlayerDraft.model_validate({"sprite_index": 3})
        assert draft.sprite_index == 3

    def test_defaults(self):
        draft = PlayerDraft.model_validate({})
        assert draft.username == "Player"
        assert (draft.x, draft.y) == (0, 0)

    def test_unknown_keys_ignored(self):
        draft = PlayerDraft.model_validate({"username": "ada", "rank": 7})
        assert not hasattr(draft, "rank")

    def test_accepts_long_username(self):
        draft = PlayerDraft.model_validate({"username": "x" * 100})
        assert len(draft.username) == 100

    def test_rejects_non_finite_position(self):
        with pytest.raises(ValidationError):
            PlayerDraft.model_validate({"x": float("inf")})


class TestPlayerStatePayload:
    """Tests for the state change / collide payload model."""

    def test_changes_only_contains_present_fields(self):
        state = PlayerStatePayload.model_validate({"x": 4, "isMoving": False})
        assert state.changes() == {"x": 4.0, "is_moving": False}

    def test_changes_excludes_id_and_collectible_id(self):
        state = PlayerStatePayload.model_validate({"id": "A", "collectibleId": "c1", "y": 2})
        assert state.changes() == {"y": 2.0}
        assert state.collectible_id == "c1"

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            PlayerStatePayload.model_validate({"x": float("nan")})

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError):
            PlayerStatePayload.model_validate({"score": -1})

    def test_non_object_payload_rejected(self):
        with pytest.raises(ValidationError):
            PlayerStatePayload.model_validate([1, 2])


class TestPlayAreaModels:
    """Tests for PlayField and SpriteSet."""

    def test_play_field_bounds(self):
        field = PlayField(min_x=5, min_y=50, width=630, height=425)
        assert field.max_x == 635
        assert field.max_y == 475
        assert field.bounds() == {"min_x": 5, "min_y": 50, "max_x": 635, "max_y": 475}

    def test_play_field_rejects_zero_size(self):
        with pytest.raises(ValidationError):
            PlayField(width=0)

    def test_sprite_set_requires_a_variant(self):
        with pytest.raises(ValidationError):
            SpriteSet(srcs=[])

    def test_sprite_set_count(self):
        assert SpriteSet().count == 3
