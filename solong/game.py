"""Game state and the rules for moving the player."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TextIO

from .gamemap import GameMap, Tile
from .printf import printf

WIN_MESSAGE = "!!!!YOU WIN!!!!"
CLOSED_MESSAGE = "Game closed"


class Key(IntEnum):
    """Key codes the game reacts to."""

    W = 13
    A = 0
    S = 1
    D = 2
    ESC = 53
    UP = 126
    DOWN = 125
    RIGHT = 124
    LEFT = 123


class Outcome(Enum):
    """What a key press or move led to."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"


_DIRECTIONS = {
    Key.W: (0, -1),
    Key.UP: (0, -1),
    Key.A: (-1, 0),
    Key.LEFT: (-1, 0),
    Key.S: (0, 1),
    Key.DOWN: (0, 1),
    Key.D: (1, 0),
    Key.RIGHT: (1, 0),
}


@dataclass
class Game:
    """A game in progress on a validated map."""

    map: GameMap
    moves: int = 0
    stream: TextIO | None = None

    def move(self, dx: int, dy: int) -> Outcome:
        """Try to move the player by ``(dx, dy)``.

        Walls block, as does the exit while collectibles remain. Every
        accepted move is counted and reported.
        """
        x, y = self.map.player
        nx, ny = x + dx, y + dy
        target = self.map.tile(nx, ny)
        if target is Tile.WALL:
            return Outcome.BLOCKED
        if target is Tile.EXIT and self.map.collectibles > 0:
            return Outcome.BLOCKED
        self.moves += 1
        printf("moves = %d\n", self.moves, stream=self.stream)
        if target is Tile.EXIT:
            return Outcome.WON
        if target is Tile.COLLECTIBLE:
            self.map.collectibles -= 1
        self.map.grid[y][x] = Tile.FLOOR.value
        self.map.grid[ny][nx] = Tile.PLAYER.value
        self.map.player = (nx, ny)
        return Outcome.MOVED

    def handle_key(self, key: int) -> Outcome:
        """React to a key code: move, quit, or ignore it."""
        try:
            known = Key(key)
        except ValueError:
            return Outcome.IGNORED
        if known is Key.ESC:
            return Outcome.QUIT
        dx, dy = _DIRECTIONS[known]
        return self.move(dx, dy)