"""The playable game: texture loading, drawing and the command entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from os import PathLike
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .game import CLOSED_MESSAGE, WIN_MESSAGE, Game, Key, Outcome  # noqa: E402
from .gamemap import MapError, Tile, parse_rows, read_rows, validate_path  # noqa: E402
from .printf import printf  # noqa: E402
from .xpm import XpmError, XpmImage, read_xpm  # noqa: E402

TILE_SIZE = 64
DEFAULT_TEXTURES = Path("textures")
TEXTURE_FILES = {
    Tile.COLLECTIBLE: "collectible.xpm",
    Tile.EXIT: "exit.xpm",
    Tile.FLOOR: "floor.xpm",
    Tile.PLAYER: "player.xpm",
    Tile.WALL: "wall.xpm",
}
USAGE = "Arguments ain't right, should be './so_long maps/map<insert number>.ber'\n"
_MISSING_TEXTURE = "texture path doesnt exist"

_PYGAME_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
}


def check_textures(directory: str | PathLike[str] = DEFAULT_TEXTURES) -> list[Path]:
    """Check that every texture file exists and can be read; return their paths."""
    paths = [Path(directory) / name for name in TEXTURE_FILES.values()]
    for path in paths:
        try:
            with open(path, "rb") as stream:
                stream.read(1)
        except OSError as exc:
            raise FileNotFoundError(f"{_MISSING_TEXTURE}: {path}") from exc
    return paths


def load_textures(directory: str | PathLike[str] = DEFAULT_TEXTURES) -> dict[Tile, XpmImage]:
    """Read the image for each kind of tile."""
    return {tile: read_xpm(Path(directory) / name) for tile, name in TEXTURE_FILES.items()}


def _to_surface(image: XpmImage) -> pygame.Surface:
    # The top byte of a pixel is its transparency: 0 opaque, 0xFF invisible.
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for index, value in enumerate(image.pixels):
        value &= 0xFFFFFFFF
        y, x = divmod(index, image.width)
        alpha = 255 - ((value >> 24) & 0xFF)
        surface.set_at((x, y), ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha))
    return surface


class Renderer:
    """Draws the map of a game onto a surface, one tile image per cell."""

    def __init__(
        self,
        game: Game,
        textures: Mapping[Tile, XpmImage],
        surface: pygame.Surface,
        tile_size: int = TILE_SIZE,
    ) -> None:
        self.game = game
        self.surface = surface
        self.tile_size = tile_size
        self._images = {tile: _to_surface(image) for tile, image in textures.items()}

    def _on_border(self, x: int, y: int) -> bool:
        game_map = self.game.map
        return x in (0, game_map.width - 1) or y in (0, game_map.height - 1)

    def draw_cell(self, x: int, y: int) -> None:
        """Draw the image of the cell at column ``x`` of row ``y``."""
        tile = Tile.WALL if self._on_border(x, y) else self.game.map.tile(x, y)
        self.surface.blit(self._images[tile], (x * self.tile_size, y * self.tile_size))

    def draw_all(self) -> None:
        """Draw every cell of the map."""
        game_map = self.game.map
        for y in range(game_map.height):
            for x in range(game_map.width):
                self.draw_cell(x, y)


def _finish(message: str, code: int) -> int:
    printf("%s\n", message)
    return code


def _run(game: Game, textures: Mapping[Tile, XpmImage]) -> int:
    pygame.init()
    try:
        size = (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("so_long")
        renderer = Renderer(game, textures, screen)
        renderer.draw_all()
        pygame.display.flip()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return _finish(CLOSED_MESSAGE, 0)
                if event.type != pygame.KEYDOWN:
                    continue
                key = _PYGAME_KEYS.get(event.key)
                if key is None:
                    continue
                before = game.map.player
                outcome = game.handle_key(key)
                if outcome is Outcome.QUIT:
                    return _finish(CLOSED_MESSAGE, 0)
                if outcome is Outcome.WON:
                    return _finish(WIN_MESSAGE, 0)
                if outcome is Outcome.MOVED:
                    renderer.draw_cell(*before)
                    renderer.draw_cell(*game.map.player)
                    pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stdout.write(USAGE)
        return 1
    try:
        check_textures()
    except FileNotFoundError:
        return _finish(_MISSING_TEXTURE, 1)
    try:
        path = validate_path(args[0])
        printf("map path = %s\nlen = %d\n", str(path), len(args[0]))
        game_map = parse_rows(read_rows(path))
    except MapError as exc:
        return _finish(str(exc), 1)
    try:
        textures = load_textures()
    except XpmError as exc:
        return _finish(str(exc), 1)
    return _run(Game(game_map), textures)