import pygame
import pytest

from heistgrid.counter import counter_pixels
from heistgrid.display import (
    Renderer,
    check_texture_files,
    required_textures,
    texture_key,
)
from heistgrid.game import Game
from heistgrid.gamemap import PLAYER_TEXTURE, UP_TEXTURE, load_map
from heistgrid.validate import MapError

COLORS = {
    "wall": (10, 10, 10),
    "empty": (20, 20, 20),
    "player": (30, 30, 30),
    "coin": (40, 40, 40),
    "exit": (50, 50, 50),
    "up": (60, 60, 60),
    "right": (70, 70, 70),
    "down": (80, 80, 80),
    "left": (90, 90, 90),
}


def _textures():
    textures = {}
    for key, color in COLORS.items():
        surface = pygame.Surface((64, 64))
        surface.fill(color)
        textures[key] = surface
    return textures


@pytest.fixture
def game(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "map.ber").write_text("111111\n1PCED1\n111111\n")
    return Game(load_map("map.ber", True), True)


@pytest.mark.parametrize(
    "tile, key",
    [("1", "wall"), ("0", "empty"), ("C", "coin"), ("P", "player"), ("E", "exit"),
     ("U", "up"), ("u", "up"), ("r", "right"), ("D", "down"), ("l", "left")],
)
def test_texture_key(tile, key):
    assert texture_key(tile) == key


def test_unknown_tile_draws_player():
    assert texture_key("?") == "player"


def test_required_textures_with_enemies():
    textures = required_textures(True)
    assert textures["up"] == UP_TEXTURE
    assert len(set(textures.values())) == 9


def test_required_textures_without_enemies_reuse_player():
    textures = required_textures(False)
    assert {textures[k] for k in ("up", "right", "down", "left")} == {PLAYER_TEXTURE}
    assert len(set(textures.values())) == 5


def test_check_texture_files_missing(tmp_path):
    with pytest.raises(MapError) as info:
        check_texture_files(False, str(tmp_path))
    assert info.value.code == 2
    assert info.value.message == "Couldnt open all textures"


def test_check_texture_files_present(tmp_path):
    for relative in required_textures(True).values():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
    assert len(check_texture_files(True, str(tmp_path))) == 9
    assert len(check_texture_files(False, str(tmp_path))) == 5


def test_check_texture_files_one_missing(tmp_path):
    for relative in required_textures(False).values():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
    with pytest.raises(MapError):
        check_texture_files(True, str(tmp_path))


def test_draw_map(game):
    screen = pygame.Surface((6 * 64, 3 * 64))
    Renderer(screen, _textures()).draw_map(game)
    for x, y, key in [(0, 0, "wall"), (1, 1, "player"), (2, 1, "coin"),
                      (3, 1, "exit"), (4, 1, "down"), (5, 2, "wall")]:
        assert tuple(screen.get_at((x * 64 + 5, y * 64 + 5)))[:3] == COLORS[key]


def test_draw_counter(game):
    screen = pygame.Surface((6 * 64, 3 * 64))
    screen.fill((255, 255, 255))
    Renderer(screen, _textures()).draw_counter(37, 6)
    pixels = counter_pixels(37, 6)
    lit = next(iter(pixels))
    assert tuple(screen.get_at(lit))[:3] == (153, 188, 198)
    dark = next(
        (x, y) for x in range(6 * 64) for y in range(64) if (x, y) not in pixels
    )
    assert tuple(screen.get_at(dark))[:3] == COLORS["wall"]
    assert tuple(screen.get_at((5, 100)))[:3] == (255, 255, 255)