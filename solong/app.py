"""Command-line entry point and the pygame window that plays a map."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import Optional, Union

from .game import TILE_SIZE, Direction, Game, Outcome, Sprite
from .mapfile import MapError, has_ber_extension, read_map
from .validate import validate_map

INVALID_ARGUMENT = "Invalid argument"
INVALID_ARG_COUNT = "Invalid number of argument"
WINDOW_TITLE = "so_long"

_FALLBACK_COLOURS = {
    Sprite.WALL: (90, 90, 90),
    Sprite.FLOOR: (40, 40, 40),
    Sprite.PLAYER: (140, 60, 200),
    Sprite.PLAYER_LEFT: (140, 60, 200),
    Sprite.EXIT_CLOSED: (110, 70, 30),
    Sprite.EXIT_OPEN: (20, 20, 20),
    Sprite.COLLECTIBLE: (230, 180, 40),
    Sprite.ENEMY: (200, 30, 30),
}


def key_to_direction(key: Union[str, int]) -> Optional[Direction]:
    """Direction for a 'w', 'a', 's' or 'd' key (letter or key code)."""
    if isinstance(key, int):
        if not 0 <= key < 0x110000:
            return None
        key = chr(key)
    try:
        return Direction(key)
    except ValueError:
        return None


def load_game(path: Union[str, "os.PathLike[str]"], bonus: bool = False) -> Game:
    """Open, check and validate the map at ``path`` and start a game on it."""
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise MapError(INVALID_ARGUMENT) from exc
    if not has_ber_extension(path):
        raise MapError(INVALID_ARGUMENT)
    game_map = validate_map(read_map(path), bonus)
    return Game(game_map, bonus)


def _report(game: Game, outcome: Outcome) -> None:
    if outcome is Outcome.BLOCKED:
        return
    if not game.bonus:
        print(f"move -> {game.moves}")
    if outcome is Outcome.LOST:
        print("GAME OVER!!")
    elif outcome is Outcome.WON:
        if game.bonus:
            print(f"You WIN with {game.moves} moves!!")
        else:
            print("You WIN !!")


def run(game: Game, tile_size: int = TILE_SIZE) -> Optional[Outcome]:
    """Play ``game`` in a window until it ends or is closed.

    Returns the final outcome, or None when the window was closed early.
    """
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (tile_size * game.game_map.width, tile_size * game.game_map.height)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        images = {}
        for sprite in Sprite:
            try:
                image = pygame.image.load(sprite.value).convert_alpha()
                if image.get_size() != (tile_size, tile_size):
                    image = pygame.transform.scale(image, (tile_size, tile_size))
            except (pygame.error, OSError):
                image = pygame.Surface((tile_size, tile_size))
                image.fill(_FALLBACK_COLOURS[sprite])
            images[sprite] = image
        font = pygame.font.Font(None, 20) if game.bonus else None
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return None
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_ESCAPE:
                    return None
                direction = key_to_direction(event.key)
                if direction is None:
                    continue
                outcome = game.move(direction)
                _report(game, outcome)
                if game.finished:
                    return outcome
            for y, row in enumerate(game.game_map.rows):
                for x in range(len(row)):
                    sprite = game.sprite_at(x, y)
                    if sprite is not None:
                        screen.blit(images[sprite], (x * tile_size, y * tile_size))
            if font is not None:
                screen.blit(font.render("Moves :", True, (0, 0, 0)), (5, 20))
                screen.blit(font.render(str(game.moves), True, (0, 0, 0)), (50, 21))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map named on the command line; '--bonus' enables extras."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = "--bonus" in args
    paths = [arg for arg in args if arg != "--bonus"]
    if len(paths) != 1:
        print(f"Error\n{INVALID_ARG_COUNT}")
        return 1
    try:
        game = load_game(paths[0], bonus)
    except MapError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    run(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())