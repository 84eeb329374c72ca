"""Checks that a map is playable: tiles, shape, walls and reachability."""

from __future__ import annotations

from .mapfile import GameMap, MapError

INVALID_MAP = "Invalid map"
INVALID_SIZE = "Invalid size of map"
INVALID_PATH = "Invalid path in map"

MAX_WIDTH = 26
MAX_HEIGHT = 14

_TILES = frozenset("PEC01")
_BONUS_TILES = _TILES | {"S"}


def check_characters(game_map: GameMap, bonus: bool = False) -> None:
    """Require known tiles only, one player, one exit and some collectibles."""
    allowed = _BONUS_TILES if bonus else _TILES
    if any(tile not in allowed for row in game_map.rows for tile in row):
        raise MapError(INVALID_MAP)
    if (
        game_map.count("P") != 1
        or game_map.count("E") != 1
        or game_map.count("C") == 0
    ):
        raise MapError(INVALID_MAP)


def check_shape(game_map: GameMap) -> None:
    """Require a rectangle no larger than the window allows."""
    if game_map.width > MAX_WIDTH or game_map.height > MAX_HEIGHT:
        raise MapError(INVALID_SIZE)
    if any(len(row) != game_map.width for row in game_map.rows):
        raise MapError(INVALID_MAP)


def check_walls(game_map: GameMap) -> None:
    """Require the map to be closed by walls on all four sides."""
    rows = game_map.rows
    if any(tile != "1" for tile in rows[0]) or any(tile != "1" for tile in rows[-1]):
        raise MapError(INVALID_MAP)
    for row in rows:
        if row and (row[0] != "1" or row[-1] != "1"):
            raise MapError(INVALID_MAP)


def check_path(game_map: GameMap, bonus: bool = False) -> frozenset[tuple[int, int]]:
    """Require every collectible and the exit to be reachable from the player.

    Walls block movement, and so do enemies in bonus mode. Returns the set
    of reachable tile positions.
    """
    start = game_map.player_start()
    if start is None:
        raise MapError(INVALID_MAP)
    blocked = {"1", "S"} if bonus else {"1"}
    remaining = game_map.count("C") + game_map.count("E")
    seen: set[tuple[int, int]] = set()
    pending = [start]
    while pending:
        x, y = pending.pop()
        if (x, y) in seen or not 0 <= y < game_map.height:
            continue
        row = game_map.rows[y]
        if not 0 <= x < len(row) or row[x] in blocked:
            continue
        seen.add((x, y))
        if row[x] in "CE":
            remaining -= 1
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    if remaining != 0:
        raise MapError(INVALID_PATH)
    return frozenset(seen)


def validate_map(game_map: GameMap, bonus: bool = False) -> GameMap:
    """Run every check in order and return the map when it passes."""
    check_characters(game_map, bonus)
    check_shape(game_map)
    check_walls(game_map)
    check_path(game_map, bonus)
    return game_map