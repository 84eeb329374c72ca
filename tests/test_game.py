import pytest

from solong.game import Direction, Game, Outcome, Sprite
from solong.mapfile import parse_map

SIMPLE = "1111111\n1P0C0E1\n1111111"
EXIT_FIRST = "1111111\n1PE0C01\n1111111"
BONUS = "11111\n1PSC1\n1E001\n11111"


def make(text, bonus=False):
    return Game(parse_map(text), bonus)


def test_initial_state():
    game = make(SIMPLE)
    assert game.player == (1, 1)
    assert game.moves == 0
    assert game.remaining == 1
    assert not game.exit_open()
    assert not game.finished


def test_direction_from_letter():
    assert Direction("w") is Direction.UP
    assert Direction("d").delta == (1, 0)
    assert Direction.UP.delta == (0, -1)


def test_move_into_floor():
    game = make(SIMPLE)
    assert game.move(Direction.RIGHT) is Outcome.MOVED
    assert game.player == (2, 1)
    assert game.moves == 1


def test_wall_blocks_and_does_not_count():
    game = make(SIMPLE)
    assert game.move(Direction.UP) is Outcome.BLOCKED
    assert game.player == (1, 1)
    assert game.moves == 0


def test_collecting_opens_exit():
    game = make(SIMPLE)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.remaining == 0
    assert game.exit_open()
    game.move(Direction.RIGHT)
    assert game.sprite_at(3, 1) is Sprite.FLOOR
    assert game.sprite_at(5, 1) is Sprite.EXIT_OPEN


def test_full_walk_wins():
    game = make(SIMPLE)
    outcomes = [game.move(Direction.RIGHT) for _ in range(4)]
    assert outcomes[-1] is Outcome.WON
    assert game.moves == 4
    assert game.finished


def test_exit_stays_closed_until_all_collected():
    game = make(EXIT_FIRST)
    assert game.move(Direction.RIGHT) is Outcome.MOVED
    assert game.sprite_at(1, 1) is Sprite.FLOOR
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.remaining == 0
    game.move(Direction.LEFT)
    assert game.move(Direction.LEFT) is Outcome.WON


def test_moving_after_end_is_an_error():
    game = make(SIMPLE)
    for _ in range(4):
        game.move(Direction.RIGHT)
    with pytest.raises(RuntimeError):
        game.move(Direction.LEFT)


def test_enemy_kills_in_bonus():
    game = make(BONUS, bonus=True)
    assert game.move(Direction.RIGHT) is Outcome.LOST
    assert game.player == (2, 1)
    assert game.outcome is Outcome.LOST


def test_bonus_facing_follows_horizontal_moves():
    game = make(BONUS, bonus=True)
    game.move(Direction.DOWN)
    game.move(Direction.RIGHT)
    assert not game.facing_left
    game.move(Direction.LEFT)
    assert game.facing_left
    assert game.sprite_at(*game.player) is Sprite.PLAYER_LEFT


def test_facing_ignored_outside_bonus():
    game = make(EXIT_FIRST)
    game.move(Direction.RIGHT)
    game.move(Direction.LEFT)
    assert not game.facing_left
    assert game.sprite_at(*game.player) is Sprite.PLAYER


def test_sprites_of_tiles():
    game = make(BONUS, bonus=True)
    assert game.sprite_at(0, 0) is Sprite.WALL
    assert game.sprite_at(2, 1) is Sprite.ENEMY
    assert game.sprite_at(3, 1) is Sprite.COLLECTIBLE
    assert game.sprite_at(1, 2) is Sprite.EXIT_CLOSED
    assert Sprite.WALL.value == "textures/wall2.xpm"


def test_render_text_round_trip_at_start():
    assert make(SIMPLE).render_text() == SIMPLE


def test_render_text_after_collecting():
    game = make(SIMPLE)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    lines = game.render_text().split("\n")
    assert lines[1][3] == "P"
    assert lines[1].count("C") == 0
    assert lines[0] == "1111111"