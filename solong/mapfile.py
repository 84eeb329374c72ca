"""Loading map files into an immutable grid of tiles."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

CANT_PRINT_MAP = "Can't print map"
CANT_READ_FILES = "Can't read the files"
MAP_EXTENSION = ".ber"


class MapError(Exception):
    """Raised when a map file cannot be read or is not a valid map."""


@dataclass(frozen=True)
class GameMap:
    """A map as rows of tile characters, newlines removed."""

    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.rows:
            raise MapError(CANT_PRINT_MAP)

    @property
    def width(self) -> int:
        """Number of tiles in the first row."""
        return len(self.rows[0])

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def tile_at(self, x: int, y: int) -> str:
        """Character of the tile in column ``x`` of row ``y``."""
        if not 0 <= y < len(self.rows) or not 0 <= x < len(self.rows[y]):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def count(self, char: str) -> int:
        """How many tiles hold ``char``."""
        return sum(row.count(char) for row in self.rows)

    def positions(self, char: str) -> list[tuple[int, int]]:
        """Coordinates ``(x, y)`` of every tile holding ``char``, row by row."""
        return [
            (x, y)
            for y, row in enumerate(self.rows)
            for x, tile in enumerate(row)
            if tile == char
        ]

    def player_start(self) -> Optional[tuple[int, int]]:
        """Position of the last 'P' in reading order, or None if there is none."""
        starts = self.positions("P")
        return starts[-1] if starts else None


def has_ber_extension(path: PathLike) -> bool:
    """True when the file name ends in '.ber'."""
    name = os.fspath(path)
    return len(name) >= len(MAP_EXTENSION) and name.endswith(MAP_EXTENSION)


def parse_map(text: str) -> GameMap:
    """Split map text into rows.

    An empty text, or one ending in a newline, is rejected.
    """
    if not text or text.endswith("\n"):
        raise MapError(CANT_PRINT_MAP)
    return GameMap(tuple(text.split("\n")))


def read_map(path: PathLike) -> GameMap:
    """Read and parse the map file at ``path``; every byte is one tile."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError(CANT_READ_FILES) from exc
    return parse_map(data.decode("latin-1"))