"""Loading and validation of ``.ber`` game maps."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path

from .lines import iter_lines

MIN_SIZE = 3
MAX_WIDTH = 40
MAX_HEIGHT = 22

_SUFFIX = ".ber"
_MIN_PATH_LENGTH = 10

_BORDER_MESSAGE = "Map should be bordered by walls (1)"


class Tile(Enum):
    """The characters a map is made of."""

    PLAYER = "P"
    COLLECTIBLE = "C"
    WALL = "1"
    FLOOR = "0"
    EXIT = "E"


class MapError(ValueError):
    """Raised when a map file or its contents are not valid."""


@dataclass
class GameMap:
    """A validated map: a grid of tile characters and the positions found in it."""

    width: int
    height: int
    grid: list[list[str]]
    player: tuple[int, int]
    exit: tuple[int, int]
    collectibles: int

    def tile(self, x: int, y: int) -> Tile:
        """Return the tile at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} map")
        return Tile(self.grid[y][x])

    def reachable(self) -> bool:
        """True when every collectible and the exit can be reached from the player.

        The exit can be reached but not walked through.
        """
        grid = [row[:] for row in self.grid]
        wall = Tile.WALL.value
        found_collectibles = 0
        found_exit = False
        stack = [self.player]
        while stack:
            x, y = stack.pop()
            if not (0 <= x < self.width and 0 <= y < self.height):
                continue
            cell = grid[y][x]
            if cell == wall:
                continue
            grid[y][x] = wall
            if cell == Tile.EXIT.value:
                found_exit = True
                continue
            if cell == Tile.COLLECTIBLE.value:
                found_collectibles += 1
            stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
        return found_collectibles == self.collectibles and found_exit


def validate_path(path: str | PathLike[str] | None) -> Path:
    """Check that ``path`` names an openable ``<name>.ber`` file and return it."""
    if path is None:
        raise MapError("wrong map path")
    text = str(path)
    if not text.endswith(_SUFFIX) or len(text) < _MIN_PATH_LENGTH:
        raise MapError("needs to be <name>.ber")
    try:
        with open(text, "rb"):
            pass
    except OSError as exc:
        raise MapError("cant open map, doesnt exist?") from exc
    return Path(text)


def _row_text(line: str) -> str:
    return line.partition("\n")[0].partition("\0")[0]


def read_rows(path: str | PathLike[str]) -> list[str]:
    """Read the map rows of a file, without their newlines.

    Blank lines may only come at the end, and every line must have the width
    of the first one.
    """
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            lines = list(iter_lines(stream))
    except OSError as exc:
        raise MapError("cant open map, doesnt exist?") from exc
    if not lines:
        raise MapError("map is empty :(")

    height = 0
    seen_blank = False
    for line in lines:
        if line.startswith("\n"):
            seen_blank = True
        elif seen_blank:
            raise MapError("empty line found in map, fix it pls thanks")
        else:
            height += 1

    width = len(_row_text(lines[0]))
    if any(len(_row_text(line)) != width for line in lines):
        raise MapError("rows need to be same size")
    return [_row_text(line) for line in lines[:height]]


def _check_borders(rows: list[str], width: int) -> None:
    wall = Tile.WALL.value
    if any(ch != wall for ch in rows[0]) or any(ch != wall for ch in rows[-1]):
        raise MapError(_BORDER_MESSAGE)
    for row in rows[1:-1]:
        if row[0] != wall or row[width - 1] != wall:
            raise MapError(_BORDER_MESSAGE)


def parse_rows(rows: Iterable[str]) -> GameMap:
    """Validate map rows and build a ``GameMap`` from them."""
    grid_rows = [row[:-1] if row.endswith("\n") else row for row in rows]
    height = len(grid_rows)
    width = len(grid_rows[0]) if grid_rows else 0
    if any(len(row) != width for row in grid_rows):
        raise MapError("rows need to be same size")
    if width > MAX_WIDTH or height > MAX_HEIGHT or width < MIN_SIZE or height < MIN_SIZE:
        raise MapError("map size is invalid!!")
    _check_borders(grid_rows, width)

    player: tuple[int, int] | None = None
    exit_pos: tuple[int, int] | None = None
    collectibles = 0
    plain = {Tile.WALL.value, Tile.FLOOR.value}
    for y in range(height - 2, -1, -1):
        for x, cell in enumerate(grid_rows[y]):
            if cell == Tile.COLLECTIBLE.value:
                collectibles += 1
            elif cell == Tile.PLAYER.value:
                if player is not None:
                    raise MapError("more than 1 player??")
                player = (x, y)
            elif cell == Tile.EXIT.value:
                if exit_pos is not None:
                    raise MapError("more than 1 exit??")
                exit_pos = (x, y)
            elif cell not in plain:
                raise MapError("Unknown element in map bro")

    if player is None:
        raise MapError("wheres player??????")
    if exit_pos is None:
        raise MapError("wheres exit??????")
    if collectibles == 0:
        raise MapError("wheres collectibles??????")

    game_map = GameMap(
        width=width,
        height=height,
        grid=[list(row) for row in grid_rows],
        player=player,
        exit=exit_pos,
        collectibles=collectibles,
    )
    if not game_map.reachable():
        raise MapError("can't collect all C and exit")
    return game_map


def load_map(path: str | PathLike[str]) -> GameMap:
    """Validate, read and parse the map file at ``path``."""
    return parse_rows(read_rows(validate_path(path)))