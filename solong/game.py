"""Game state: the player walking a validated map, collecting and escaping."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .mapfile import GameMap, MapError
from .validate import INVALID_MAP

TILE_SIZE = 72


class Direction(Enum):
    """A step on the grid, keyed by the letter that triggers it."""

    UP = "w"
    LEFT = "a"
    DOWN = "s"
    RIGHT = "d"

    @property
    def delta(self) -> tuple[int, int]:
        """Change of ``(x, y)`` for one step."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
}


class Outcome(Enum):
    """What a move attempt led to."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    LOST = "lost"


class Sprite(Enum):
    """What is drawn on a tile, valued by its texture file."""

    WALL = "textures/wall2.xpm"
    FLOOR = "textures/road.xpm"
    PLAYER = "textures/purple_turtle.xpm"
    PLAYER_LEFT = "textures/purple_turtle_90.xpm"
    EXIT_CLOSED = "textures/manhole_close.xpm"
    EXIT_OPEN = "textures/manhole.xpm"
    COLLECTIBLE = "textures/pizza.xpm"
    ENEMY = "textures/shredder.xpm"


_SPRITE_CHARS = {
    Sprite.WALL: "1",
    Sprite.FLOOR: "0",
    Sprite.PLAYER: "P",
    Sprite.PLAYER_LEFT: "P",
    Sprite.EXIT_CLOSED: "E",
    Sprite.EXIT_OPEN: "E",
    Sprite.COLLECTIBLE: "C",
    Sprite.ENEMY: "S",
}


class Game:
    """A running game on ``game_map``; ``bonus`` enables enemies and facing."""

    def __init__(self, game_map: GameMap, bonus: bool = False) -> None:
        start = game_map.player_start()
        if start is None:
            raise MapError(INVALID_MAP)
        self.game_map = game_map
        self.bonus = bonus
        self.player: tuple[int, int] = start
        self.moves = 0
        self.facing_left = False
        self.outcome: Optional[Outcome] = None
        self._collected: set[tuple[int, int]] = set()

    @property
    def remaining(self) -> int:
        """Collectibles still on the map."""
        return self.game_map.count("C") - len(self._collected)

    @property
    def finished(self) -> bool:
        """True once the game has been won or lost."""
        return self.outcome in (Outcome.WON, Outcome.LOST)

    def _tile(self, x: int, y: int) -> str:
        if (x, y) in self._collected:
            return "0"
        return self.game_map.tile_at(x, y)

    def exit_open(self) -> bool:
        """The exit opens once every collectible has been taken."""
        return self.remaining == 0

    def move(self, direction: Direction) -> Outcome:
        """Try to step the player one tile in ``direction``."""
        if self.finished:
            raise RuntimeError("the game is over")
        dx, dy = direction.delta
        x, y = self.player[0] + dx, self.player[1] + dy
        try:
            tile = self._tile(x, y)
        except IndexError:
            return Outcome.BLOCKED
        if tile == "C":
            self._collected.add((x, y))
            tile = "0"
        if tile == "1":
            return Outcome.BLOCKED
        if self.bonus and direction in (Direction.LEFT, Direction.RIGHT):
            self.facing_left = direction is Direction.LEFT
        self.player = (x, y)
        self.moves += 1
        if self.bonus and tile == "S":
            result = Outcome.LOST
        elif tile == "E" and self.exit_open():
            result = Outcome.WON
        else:
            result = Outcome.MOVED
        if result in (Outcome.WON, Outcome.LOST):
            self.outcome = result
        return result

    def sprite_at(self, x: int, y: int) -> Optional[Sprite]:
        """Sprite drawn on tile ``(x, y)``, or None for an unknown tile."""
        tile = self._tile(x, y)
        if tile == "1":
            return Sprite.WALL
        if (x, y) == self.player:
            return Sprite.PLAYER_LEFT if self.facing_left else Sprite.PLAYER
        if tile in ("0", "P"):
            return Sprite.FLOOR
        if tile == "C":
            return Sprite.COLLECTIBLE
        if tile == "E":
            return Sprite.EXIT_OPEN if self.exit_open() else Sprite.EXIT_CLOSED
        if tile == "S":
            return Sprite.ENEMY
        return None

    def render_text(self) -> str:
        """The current board as map text, the player shown where it stands."""
        lines = []
        for y, row in enumerate(self.game_map.rows):
            chars = []
            for x in range(len(row)):
                sprite = self.sprite_at(x, y)
                chars.append(" " if sprite is None else _SPRITE_CHARS[sprite])
            lines.append("".join(chars))
        return "\n".join(lines)