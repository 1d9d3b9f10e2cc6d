"""Unit tests for player movement, facing and bounds."""

import math

import pytest
from pygame import Vector2

from src.entities.player import Player
from src.game import Game
from src.input_state import InputState
from src.utils.exceptions import ShootingDirectionUndefined
from config import PLAYER_SPEED, PROJECTILE_SPEED


def hold(game: Game, *keys: str) -> None:
    for key in keys:
        game.input_state.press(key)


def step(game: Game, frames: int = 1) -> None:
    for _ in range(frames):
        game.update()


def assert_in_bounds(game: Game) -> None:
    player = game.player
    pos = player.get_pos()
    assert player.width / 2 <= pos.x <= game.width - player.width / 2
    assert player.height / 2 <= pos.y <= game.height - player.height / 2


class TestPlayerDefaults:
    def test_starts_in_the_middle(self, game: Game):
        assert game.player.get_pos() == Vector2(400, 300)

    def test_default_state(self, game: Game):
        player = game.player
        assert player.width == player.height == 40
        assert player.get_speed() == PLAYER_SPEED
        assert player.get_health().get_value() == 100
        assert player.get_health().max_value == 100
        assert not player.is_moving
        assert player.get_last_direction() == Vector2(1, 0)

    def test_standing_still_does_not_move(self, game: Game):
        step(game, 10)
        assert game.player.get_pos() == Vector2(400, 300)
        assert not game.player.is_moving


class TestMovement:
    @pytest.mark.parametrize(
        "key, expected",
        [
            ("w", Vector2(0, -PLAYER_SPEED)),
            ("s", Vector2(0, PLAYER_SPEED)),
            ("a", Vector2(-PLAYER_SPEED, 0)),
            ("d", Vector2(PLAYER_SPEED, 0)),
            ("up", Vector2(0, -PLAYER_SPEED)),
            ("down", Vector2(0, PLAYER_SPEED)),
            ("left", Vector2(-PLAYER_SPEED, 0)),
            ("right", Vector2(PLAYER_SPEED, 0)),
        ],
    )
    def test_axis_movement(self, game: Game, key: str, expected: Vector2):
        start = game.player.get_pos().copy()
        hold(game, key)
        step(game)
        assert game.player.get_pos() - start == expected
        assert game.player.is_moving

    @pytest.mark.parametrize("keys", [("w", "d"), ("w", "a"), ("s", "d"), ("down", "left")])
    def test_diagonal_speed_matches_axis_speed(self, game: Game, keys: tuple[str, str]):
        start = game.player.get_pos().copy()
        hold(game, *keys)
        step(game)
        displacement = game.player.get_pos() - start
        assert displacement.x != 0 and displacement.y != 0
        assert displacement.length() == pytest.approx(PLAYER_SPEED)

    def test_opposite_keys_cancel(self, game: Game):
        hold(game, "a", "d")
        step(game)
        assert game.player.get_pos() == Vector2(400, 300)
        assert game.player.move_direction == Vector2()

    def test_releasing_a_key_stops_the_player(self, game: Game):
        hold(game, "d")
        step(game)
        game.input_state.release("d")
        pos = game.player.get_pos().copy()
        step(game)
        assert game.player.get_pos() == pos
        assert not game.player.is_moving


class TestFacingDirection:
    """The facing direction follows the last direction key in the order up, down, left, right."""

    @pytest.mark.parametrize(
        "keys, expected",
        [
            (("w",), Vector2(0, -1)),
            (("s",), Vector2(0, 1)),
            (("a",), Vector2(-1, 0)),
            (("d",), Vector2(1, 0)),
            (("w", "s"), Vector2(0, 1)),
            (("a", "d"), Vector2(1, 0)),
            (("w", "a"), Vector2(-1, 0)),
            (("s", "d"), Vector2(1, 0)),
            (("d", "w"), Vector2(1, 0)),
            (("w", "s", "a", "d"), Vector2(1, 0)),
            (("w", "s", "a"), Vector2(-1, 0)),
        ],
    )
    def test_priority_order(self, game: Game, keys: tuple[str, ...], expected: Vector2):
        hold(game, *keys)
        step(game)
        assert game.player.get_last_direction() == expected

    def test_opposing_vertical_keys_still_face_down(self, game: Game):
        hold(game, "w", "s")
        step(game)
        assert game.player.move_direction == Vector2()
        assert game.player.get_last_direction() == Vector2(0, 1)
        assert game.player.is_moving

    def test_facing_persists_without_input(self, game: Game):
        hold(game, "w")
        step(game)
        game.input_state.release("w")
        step(game, 5)
        assert game.player.get_last_direction() == Vector2(0, -1)


class TestBounds:
    @pytest.mark.parametrize("keys", [("w",), ("s",), ("a",), ("d",), ("w", "a"), ("s", "d")])
    def test_player_never_leaves_the_canvas(self, game: Game, keys: tuple[str, ...]):
        hold(game, *keys)
        for _ in range(200):
            step(game)
            assert_in_bounds(game)

    def test_corner(self, game: Game):
        hold(game, "w", "a")
        step(game, 200)
        assert game.player.get_pos() == Vector2(20, 20)

    def test_set_pos_is_clamped(self, game: Game):
        game.player.set_pos(Vector2(-100, 10_000))
        assert game.player.get_pos() == Vector2(20, 580)

    def test_clamped_on_creation(self):
        player = Player(Vector2(0, 0), bounds=(100, 100))
        assert player.get_pos() == Vector2(20, 20)


class TestShoot:
    def test_zero_length_aim_raises(self):
        player = Player(Vector2(50, 50), bounds=(100, 100))
        with pytest.raises(ShootingDirectionUndefined):
            player.shoot(Vector2(50, 50))

    def test_projectile_leaves_from_the_player(self):
        player = Player(Vector2(50, 50), bounds=(100, 100))
        projectile, particles = player.shoot(Vector2(50, 0))
        assert projectile.get_pos() == Vector2(50, 50)
        assert projectile.get_pos() is not player.get_pos()
        assert projectile.get_vel().x == pytest.approx(0)
        assert projectile.get_vel().y == pytest.approx(-PROJECTILE_SPEED)
        assert len(particles) == 5

    def test_steer_uses_given_input_state(self):
        player = Player(Vector2(50, 50), bounds=(100, 100))
        state = InputState()
        state.press("s")
        player.steer(state)
        player.update()
        assert player.get_pos() == Vector2(50, 55)
        assert math.isclose(player.move_direction.length(), 1.0)
