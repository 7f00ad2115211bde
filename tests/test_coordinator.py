# Area: Core Tests
"""Tests for the Session Coordinator event protocol."""

import itertools
import random

from unittest.mock import patch

from arena_sync import (
    Collectible,
    ConnectionState,
    DeliveryScope,
    OutboundEvent,
    PlayField,
    SessionCoordinator,
    SpriteSet,
)

SPRITES = SpriteSet(srcs=["a.png", "b.png", "c.png", "d.png"], width=10, height=10)
FIELD = PlayField(min_x=0, min_y=0, width=200, height=150)


def create_coordinator(value=10, sprite_index=2, position=(5, 5)):
    """Coordinator with a known collectible and deterministic randomness."""
    counter = itertools.count(1)
    initial = Collectible(
        id="coin-0", x=position[0], y=position[1],
        sprite_index=sprite_index, value=value,
    )
    return SessionCoordinator(
        play_field=FIELD,
        sprite_set=SPRITES,
        collectible_value=value,
        rng=random.Random(42),
        id_factory=lambda: f"coin-{next(counter)}",
        initial_collectible=initial,
    )


def received_by(messages, connection_id):
    """Messages a connection would receive, in order."""
    out = []
    for m in messages:
        if m.scope is DeliveryScope.ALL:
            out.append(m)
        elif m.scope is DeliveryScope.SENDER and m.origin == connection_id:
            out.append(m)
        elif m.scope is DeliveryScope.OTHERS and m.origin != connection_id:
            out.append(m)
    return out


def events(messages):
    return [m.event for m in messages]


class TestJoinGame:
    """Tests for joinGame."""

    def test_first_player_gets_empty_roster_and_collectible(self):
        coord = create_coordinator()
        messages = coord.handle_event("A", "joinGame", {"username": "alice", "x": 10, "y": 10})

        to_a = received_by(messages, "A")
        assert events(to_a) == [OutboundEvent.CURRENT_OPPONENTS, OutboundEvent.COLLECTIBLE]
        assert to_a[0].payload == []
        assert to_a[1].payload["id"] == "coin-0"
        assert coord.connection_state("A") == ConnectionState.JOINED

    def test_second_player_sees_first_and_first_sees_new_opponent(self):
        coord = create_coordinator()
        coord.handle_event("A", "joinGame", {"username": "alice", "x": 10, "y": 10})

        messages = coord.handle_event("B", "joinGame", {"username": "bob", "x": 40, "y": 40})

        to_a = received_by(messages, "A")
        assert events(to_a) == [OutboundEvent.NEW_OPPONENT]
        assert to_a[0].payload["id"] == "B"
        assert to_a[0].payload["username"] == "bob"

        to_b = received_by(messages, "B")
        assert events(to_b) == [OutboundEvent.CURRENT_OPPONENTS, OutboundEvent.COLLECTIBLE]
        roster = to_b[0].payload
        assert [p["id"] for p in roster] == ["A"]
        assert (roster[0]["x"], roster[0]["y"]) == (10, 10)

    def test_invalid_join_payload_is_dropped(self):
        coord = create_coordinator()
        coord.open_connection("A")

        messages = coord.handle_event("A", "joinGame", {"spriteIndex": -1})

        assert messages == []
        assert len(coord.registry) == 0
        assert coord.connection_state("A") == ConnectionState.CONNECTING

    def test_join_without_open_connection(self):
        coord = create_coordinator()
        messages = coord.handle_event("A", "joinGame", None)
        assert len(messages) == 3
        assert coord.registry.get("A").username == "Player"

    def test_long_username_still_joins(self):
        coord = create_coordinator()
        coord.open_connection("A")

        messages = coord.handle_event("A", "joinGame", {"username": "x" * 100})

        assert len(messages) == 3
        assert coord.registry.get("A").username == "x" * 100
        assert coord.connection_state("A") == ConnectionState.JOINED

    def test_rejoin_keeps_score(self):
        coord = create_coordinator()
        coord.handle_event("A", "joinGame", {"username": "alice"})
        coord.handle_event("A", "playerCollideWithCollectible", {})

        messages = coord.handle_event("A", "joinGame", {"username": "alice2"})

        assert coord.registry.get("A").score == 10
        new_opponent = [m for m in messages if m.event is OutboundEvent.NEW_OPPONENT]
        assert new_opponent[0].payload["score"] == 10

    def test_non_finite_position_is_dropped(self):
        coord = create_coordinator()
        coord.handle_event("A", "joinGame", {"username": "alice", "x": 10, "y": 10})

        messages = coord.handle_event("A", "playerStateChange", {"x": float("nan")})

        assert messages == []
        assert coord.registry.get("A").x == 10


class TestPlayerStateChange:
    """Tests for playerStateChange."""

    def test_update_is_relayed_to_others_only(self):
        coord = create_coordinator()
        coord.handle_event("A", "joinGame", {"username": "alice"})

        messages = coord.handle_event("A", "playerStateChange", {"x": 30, "y": 35, "direction": "left", "isMoving": True})

        assert len(messages) == 1
        assert messages[0].event is OutboundEvent.OPPONENT_STATE_CHANGE
        assert messages[0].scope is DeliveryScope.OTHERS
        assert messages[0].payload["isMoving"] is True
        stored = coord.registry.get("A")
        assert stored.position == (30, 35)
        assert stored.direction == "left"

    def test_update_for_unknown_connection_is_dropped(self):
        coord = create_coordinator()
        before = coord.collectibles.current

        messages = coord.handle_event("ghost", "playerStateChange", {"x": 1})

        assert messages == []
        assert len(coord.registry) == 0
        assert coord.collectibles.current is before

    def test_update_before_join_is_dropped(self):
        coord = create_coordinator()
        coord.open_connection("A")
        assert coord.handle_event("A", "playerStateChange", {"x": 1}) == []

    def test_late_update_after_disconnect_is_dropped(self):
        coord = create_coordinator()
        coord.handle_event("A", "joinGame", {"username": "alice"})
        coord.handle_event("A", "disconnect")

        messages = coord.handle_event("A", "playerStateChange", {"x": 99})

        assert messages == []
        assert "A" not in coord.registry
        assert coord.connection_state("A") is None


class TestPlayerCollide:
    """Tests for playerCollideWithCollectible."""

    def test_collision_scores_and_respawns(self):
        coord = create_coordinator(value=10, sprite_index=2, position=(5, 5))
        coord.handle_event("A", "joinGame", {"username": "alice"})
        coord.handle_event("B", "joinGame", {"username": "bob"})

        messages = coord.handle_event("A", "playerCollideWithCollectible", {"x": 6, "y": 6, "score": 0})

        assert coord.registry.get("A").score == 10

        to_a = received_by(messages, "A")
        assert events(to_a) == [OutboundEvent.SCORED, OutboundEvent.COLLECTIBLE]
        assert to_a[0].payload == 10

        to_b = received_by(messages, "B")
        assert events(to_b) == [OutboundEvent.OPPONENT_STATE_CHANGE, OutboundEvent.COLLECTIBLE]
        assert to_b[0].payload["score"] == 10

        collectible_msgs = [m for m in messages if m.event is OutboundEvent.COLLECTIBLE]
        assert len(collectible_msgs) == 1
        new = collectible_msgs[0].payload
        assert collectible_msgs[0].scope is DeliveryScope.ALL
        assert new["spriteSrcIndex"] == 3
        assert (new["x"], new["y"]) != (5, 5)
        assert new["id"] != "coin-0"
        assert coord.collectibles.current.id == new["id"]

    def test_score_uses_server_side_value(self):
        """A client-reported score does not inflate the award."""
        coord = create_coordinator(value=10)
        coord.handle_event("A", "joinGame", {"username": "alice"})

        coord.handle_event("A", "playerCollideWithCollectible", {"score": 500})

        assert coord.registry.get("A").score == 10

    def test_collision_for_unknown_connection_is_dropped(self):
        coord = create_coordinator()
        before = coord.collectibles.current

        messages = coord.handle_event("ghost", "playerCollideWithCollectible", {})

        assert messages == []
        assert coord.collectibles.current is before
        assert coord.collectibles.respawn_count == 0

    def test_stale_collectible_claim_is_dropped(self):
        coord = create_coordinator(value=10)
        coord.handle_event("A", "joinGame", {"username": "alice"})
        coord.handle_event("A", "playerCollideWithCollectible", {"collectibleId": "coin-0"})

        with patch("arena_sync._core.handler_collide.logger") as mock_logger:
            messages = coord.handle_event("A", "playerCollideWithCollectible", {"collectibleId": "coin-0"})
            mock_logger.info.assert_called()

        assert messages == []
        assert coord.registry.get("A").score == 10
        assert coord.collectibles.respawn_count == 1

    def test_repeated_collision_without_id_awards_again(self):
        coord = create_coordinator(value=10)
        coord.handle_event("A", "joinGame", {"username": "alice"})

        coord.handle_event("A", "playerCollideWithCollectible", {})
        coord.handle_event("A", "playerCollideWithCollectible", {})

        assert coord.registry.get("A").score == 20
        assert coord.collectibles.respawn_count == 2


class TestDisconnect:
    """Tests for disconnect."""

    def test_disconnect_notifies_others(self):
        coord = create_coordinator()
        coord.handle_event("A", "joinGame", {"username": "alice"})

        messages = coord.handle_event("A", "disconnect")

        assert len(messages) == 1
        assert messages[0].event is OutboundEvent.OPPONENT_LEAVE
        assert messages[0].scope is DeliveryScope.OTHERS
        assert messages[0].payload == "A"
        assert "A" not in coord.registry

    def test_disconnect_before_join_broadcasts_nothing(self):
        coord = create_coordinator()
        coord.open_connection("A")

        assert coord.handle_event("A", "disconnect") == []
        assert coord.open_connections == []

    def test_second_disconnect_is_ignored(self):
        coord = create_coordinator()
        coord.handle_event("A", "joinGame", {"username": "alice"})
        coord.handle_event("A", "disconnect")

        assert coord.handle_event("A", "disconnect") == []


class TestUnknownEvents:
    """Tests for unrecognized event names."""

    def test_unknown_event_is_dropped(self):
        coord = create_coordinator()
        with patch("arena_sync._core.coordinator.logger") as mock_logger:
            assert coord.handle_event("A", "teleport", {}) == []
            mock_logger.warning.assert_called()
