"""Textures, drawing and the interactive window of the game."""

from __future__ import annotations

import os
from collections.abc import Mapping

import pygame

from heistgrid.counter import counter_pixels
from heistgrid.digits import COUNTER_COLOR
from heistgrid.game import Direction, Game, GameOver, Outcome
from heistgrid.gamemap import (
    COIN_TEXTURE,
    DOWN_TEXTURE,
    EXIT_TEXTURE,
    FLOOR_TEXTURE,
    LEFT_TEXTURE,
    PLAYER_TEXTURE,
    RIGHT_TEXTURE,
    SPRITE_SIZE,
    UP_TEXTURE,
    WALL_TEXTURE,
    GameMap,
    resolve_path,
)
from heistgrid.validate import MapError

_TILE_KEYS = {
    "1": "wall",
    "0": "empty",
    "C": "coin",
    "P": "player",
    "E": "exit",
    "U": "up",
    "u": "up",
    "R": "right",
    "r": "right",
    "D": "down",
    "d": "down",
    "L": "left",
    "l": "left",
}

_KEY_DIRECTIONS = {
    pygame.K_w: Direction.UP,
    pygame.K_a: Direction.LEFT,
    pygame.K_s: Direction.DOWN,
    pygame.K_d: Direction.RIGHT,
}


def texture_key(tile: str) -> str:
    """Return the name of the texture that draws ``tile``."""
    return _TILE_KEYS.get(tile, "player")


def required_textures(with_enemies: bool) -> dict[str, str]:
    """Return the texture file for each texture name.

    Without enemies the enemy textures fall back to the player's.
    """
    textures = {
        "wall": WALL_TEXTURE,
        "empty": FLOOR_TEXTURE,
        "player": PLAYER_TEXTURE,
        "coin": COIN_TEXTURE,
        "exit": EXIT_TEXTURE,
    }
    if with_enemies:
        textures.update(
            up=UP_TEXTURE, right=RIGHT_TEXTURE, down=DOWN_TEXTURE, left=LEFT_TEXTURE
        )
    else:
        textures.update(
            up=PLAYER_TEXTURE,
            right=PLAYER_TEXTURE,
            down=PLAYER_TEXTURE,
            left=PLAYER_TEXTURE,
        )
    return textures


def _texture_path(relative: str, base: str | None) -> str:
    if base is None:
        return resolve_path(relative)
    return os.path.join(base, relative)


def check_texture_files(with_enemies: bool, base: str | None = None) -> list[str]:
    """Check that every needed texture file can be opened.

    Returns the distinct paths checked; raises MapError if any fails.
    """
    paths = list(
        dict.fromkeys(
            _texture_path(relative, base)
            for relative in required_textures(with_enemies).values()
        )
    )
    missing = False
    for path in paths:
        try:
            with open(path, "r+b"):
                pass
        except OSError:
            missing = True
    if missing:
        raise MapError("Couldnt open all textures", 2)
    return paths


def load_textures(
    with_enemies: bool, base: str | None = None
) -> dict[str, pygame.Surface]:
    """Load every texture as a surface, keyed by texture name."""
    check_texture_files(with_enemies, base)
    loaded: dict[str, pygame.Surface] = {}
    textures: dict[str, pygame.Surface] = {}
    for key, relative in required_textures(with_enemies).items():
        path = _texture_path(relative, base)
        if path not in loaded:
            surface = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                surface = surface.convert_alpha()
            loaded[path] = surface
        textures[key] = loaded[path]
    return textures


class Renderer:
    """Draws the grid and the move counter onto a surface."""

    def __init__(
        self, screen: pygame.Surface, textures: Mapping[str, pygame.Surface]
    ) -> None:
        self.screen = screen
        self.textures = textures
        self._tile_area = pygame.Rect(0, 0, SPRITE_SIZE, SPRITE_SIZE)

    def draw_map(self, game: Game) -> None:
        """Draw every tile of the game's map."""
        for y, row in enumerate(game.map.grid):
            for x, tile in enumerate(row):
                self._put(texture_key(tile), x, y)

    def draw_counter(self, moves: int, map_width: int) -> None:
        """Repaint the top wall row and draw the move count over it."""
        for x in range(map_width):
            self._put("wall", x, 0)
        color = pygame.Color(
            (COUNTER_COLOR >> 16) & 0xFF, (COUNTER_COLOR >> 8) & 0xFF, COUNTER_COLOR & 0xFF
        )
        width, height = self.screen.get_size()
        self.screen.lock()
        try:
            for px, py in counter_pixels(moves, map_width):
                if 0 <= px < width and 0 <= py < height:
                    self.screen.set_at((px, py), color)
        finally:
            self.screen.unlock()

    def _put(self, key: str, x: int, y: int) -> None:
        self.screen.blit(
            self.textures[key], (x * SPRITE_SIZE, y * SPRITE_SIZE), self._tile_area
        )


def run_game(game_map: GameMap, with_enemies: bool) -> Outcome:
    """Open the window and play until the run ends; return how it ended."""
    check_texture_files(with_enemies)
    game = Game(game_map, with_enemies)
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game_map.width * SPRITE_SIZE, game_map.height * SPRITE_SIZE)
        )
        pygame.display.set_caption(game_map.name)
        renderer = Renderer(screen, load_textures(with_enemies))

        def redraw() -> None:
            renderer.draw_map(game)
            if with_enemies:
                renderer.draw_counter(game.moves, game_map.width)
            pygame.display.flip()

        renderer.draw_map(game)
        print(game.status_message(), end="")
        if with_enemies:
            renderer.draw_counter(game.moves, game_map.width)
        pygame.display.flip()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.quit()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        game.quit()
                    direction = _KEY_DIRECTIONS.get(event.key)
                    if direction is not None and game.move(direction):
                        redraw()
            clock.tick(60)
    except GameOver as over:
        return over.outcome
    finally:
        pygame.quit()