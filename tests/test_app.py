import pygame
import pytest

from solong.app import (
    TEXTURE_FILES,
    Renderer,
    check_textures,
    load_textures,
    main,
)
from solong.game import Game
from solong.gamemap import Tile, parse_rows
from solong.xpm import parse_xpm

COLORS = {
    Tile.WALL: "#102030",
    Tile.FLOOR: "#405060",
    Tile.PLAYER: "#ff0000",
    Tile.COLLECTIBLE: "#00ff00",
    Tile.EXIT: "#0000ff",
}


def _rgba(hex_color):
    value = int(hex_color[1:], 16)
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255)


def _solid(hex_color):
    return parse_xpm(["2 2 1 1", f"a c {hex_color}", "aa", "aa"])


def _write_textures(directory):
    directory.mkdir()
    for tile, name in TEXTURE_FILES.items():
        (directory / name).write_text(
            '/* XPM */\nstatic char *x[] = {\n"1 1 1 1",\n'
            f'"a c {COLORS[tile]}",\n"a"\n}};\n'
        )


def _renderer():
    game = Game(parse_rows(["11111", "1PCE1", "11111"]))
    textures = {tile: _solid(color) for tile, color in COLORS.items()}
    surface = pygame.Surface((10, 6), pygame.SRCALPHA)
    return game, surface, Renderer(game, textures, surface, tile_size=2)


def test_check_textures_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        check_textures(tmp_path)


def test_check_textures_present(tmp_path):
    directory = tmp_path / "textures"
    _write_textures(directory)
    paths = check_textures(directory)
    assert sorted(p.name for p in paths) == sorted(TEXTURE_FILES.values())


def test_load_textures_reads_colors(tmp_path):
    directory = tmp_path / "textures"
    _write_textures(directory)
    textures = load_textures(directory)
    assert set(textures) == set(Tile)
    assert textures[Tile.PLAYER].pixel(0, 0) == int(COLORS[Tile.PLAYER][1:], 16)


def test_draw_all_places_tiles():
    _, surface, renderer = _renderer()
    renderer.draw_all()
    assert surface.get_at((0, 0)) == _rgba(COLORS[Tile.WALL])
    assert surface.get_at((2, 2)) == _rgba(COLORS[Tile.PLAYER])
    assert surface.get_at((4, 2)) == _rgba(COLORS[Tile.COLLECTIBLE])
    assert surface.get_at((6, 2)) == _rgba(COLORS[Tile.EXIT])
    assert surface.get_at((9, 5)) == _rgba(COLORS[Tile.WALL])


def test_draw_cell_after_move():
    game, surface, renderer = _renderer()
    renderer.draw_all()
    before = game.map.player
    game.move(1, 0)
    renderer.draw_cell(*before)
    renderer.draw_cell(*game.map.player)
    assert surface.get_at((2, 2)) == _rgba(COLORS[Tile.FLOOR])
    assert surface.get_at((4, 2)) == _rgba(COLORS[Tile.PLAYER])


def test_main_wrong_argument_count(capsys):
    assert main([]) == 1
    assert "Arguments ain't right" in capsys.readouterr().out


def test_main_missing_textures(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["maps/map1.ber"]) == 1
    assert "texture path doesnt exist" in capsys.readouterr().out


def test_main_bad_map_name(tmp_path, monkeypatch, capsys):
    _write_textures(tmp_path / "textures")
    monkeypatch.chdir(tmp_path)
    assert main(["x.ber"]) == 1
    assert "needs to be <name>.ber" in capsys.readouterr().out


def test_main_invalid_map(tmp_path, monkeypatch, capsys):
    _write_textures(tmp_path / "textures")
    (tmp_path / "maps").mkdir()
    (tmp_path / "maps" / "map1.ber").write_text("11111\n1P0E1\n11111\n")
    monkeypatch.chdir(tmp_path)
    assert main(["maps/map1.ber"]) == 1
    out = capsys.readouterr().out
    assert "map path = maps/map1.ber" in out
    assert "wheres collectibles??????" in out