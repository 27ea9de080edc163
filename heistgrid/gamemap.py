"""Loading a map file from disk into a validated game map."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from heistgrid.validate import (
    MapError,
    check_counts,
    check_edges,
    check_path,
    count_tiles,
    find_player,
)

# Key codes as delivered by the X11 keyboard layer.
W_KEY = 119
A_KEY = 97
S_KEY = 115
D_KEY = 100
ESC_KEY = 65307

# Edge length of one tile in pixels; larger sprites are cut off.
SPRITE_SIZE = 64
MAX_MOVES = 999999

WALL_TEXTURE = "textures/wall.xpm"
FLOOR_TEXTURE = "textures/free.xpm"
PLAYER_TEXTURE = "textures/player.xpm"
COIN_TEXTURE = "textures/coin.xpm"
EXIT_TEXTURE = "textures/exit.xpm"
UP_TEXTURE = "textures/up.xpm"
RIGHT_TEXTURE = "textures/right.xpm"
DOWN_TEXTURE = "textures/down.xpm"
LEFT_TEXTURE = "textures/left.xpm"

MAP_SUFFIX = ".ber"


@dataclass
class GameMap:
    """A validated, rectangular play area."""

    name: str
    grid: list[list[str]]
    width: int
    height: int
    player_x: int
    player_y: int
    coins_total: int
    enemies_total: int = 0
    rows_source: list[str] = field(default_factory=list, repr=False)

    def tile(self, x: int, y: int) -> str:
        """Return the tile character at column ``x`` of row ``y``."""
        return self.grid[y][x]


def check_map_name(name: str | None) -> None:
    """Raise MapError unless ``name`` is a non-trivial path ending in .ber."""
    if name is None:
        raise MapError("Map name is null", 2)
    if name == "":
        raise MapError("Map name is empty", 2)
    if len(name) < len(MAP_SUFFIX) + 1:
        raise MapError("Map name too short to end in .ber", 5)
    if not name.endswith(MAP_SUFFIX):
        raise MapError("File does not end in '.ber'", 5)


def resolve_path(filename: str) -> str:
    """Return ``filename`` with ``./`` prepended unless it is absolute or already so."""
    if filename.startswith("/") or filename.startswith("./"):
        return filename
    return "./" + filename


def read_map_lines(path: str) -> list[str]:
    """Read the map rows from ``path``, without line terminators.

    Reading stops at the first blank line; anything after it is ignored.
    """
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("Could not open file", 2) from exc
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    rows: list[str] = []
    for part in parts:
        if part == "":
            break
        rows.append(part)
    if not rows:
        raise MapError("Map File is empty or invalid", 5)
    return rows


def measure_width(lines: Sequence[str]) -> int:
    """Return the common length of all rows, or raise MapError if they differ."""
    if not lines:
        raise MapError("Map is not rectangular (width)", 5)
    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise MapError("Map is not rectangular (width)", 5)
    return width


def load_map(name: str | None, with_enemies: bool) -> GameMap:
    """Read and validate the map file ``name``, returning the game map.

    Enemy tiles (U, R, D, L) are only accepted when ``with_enemies`` is true.
    """
    check_map_name(name)
    assert name is not None
    rows = read_map_lines(resolve_path(name))
    width = measure_width(rows)
    counts = count_tiles(rows, with_enemies)
    check_counts(counts)
    check_edges(rows)
    check_path(rows)
    start = find_player(rows)
    if start is None:
        raise MapError("Wrong amount of players, exactly 1")
    return GameMap(
        name=name,
        grid=[list(row) for row in rows],
        width=width,
        height=len(rows),
        player_x=start[0],
        player_y=start[1],
        coins_total=counts.c,
        enemies_total=counts.enemies,
        rows_source=list(rows),
    )