"""Checks on the tiles of a map grid: counts, enclosure and reachability."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COIN = "C"
EXIT = "E"
ENEMIES = "URDL"

_ENCLOSURE_ERROR = "Map not properly enclosed"


class MapError(Exception):
    """A map file or its contents failed validation."""

    def __init__(self, message: str, code: int = 5) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


@dataclass
class TileCounts:
    """How often each kind of tile occurs in a map."""

    one: int = 0
    p: int = 0
    e: int = 0
    c: int = 0
    enemies: int = 0
    other: int = 0


def count_tiles(rows: Sequence[str], with_enemies: bool) -> TileCounts:
    """Count walls, players, coins, exits, enemies and unknown tiles.

    Enemy letters are only recognised when ``with_enemies`` is true;
    otherwise they count as unknown tiles.
    """
    counts = TileCounts()
    for row in rows:
        for tile in row:
            if tile == WALL:
                counts.one += 1
            elif tile == PLAYER:
                counts.p += 1
            elif tile == COIN:
                counts.c += 1
            elif tile == EXIT:
                counts.e += 1
            elif tile == FLOOR:
                continue
            elif with_enemies and tile in ENEMIES:
                counts.enemies += 1
            else:
                counts.other += 1
    return counts


def check_counts(counts: TileCounts) -> None:
    """Raise MapError if the tile counts do not make a playable map."""
    if counts.one < 1:
        raise MapError("Not enough 1s in map")
    if counts.p != 1:
        raise MapError("Wrong amount of players, exactly 1")
    if counts.c < 1:
        raise MapError("Not enough collectibles, min is 1")
    if counts.e != 1:
        raise MapError("Wrong amount of exits, exactly 1")
    if counts.other > 0:
        raise MapError("Invalid character found in map")


def find_player(rows: Sequence[str]) -> tuple[int, int] | None:
    """Return the (x, y) of the first player tile, scanning row by row."""
    for y, row in enumerate(rows):
        x = row.find(PLAYER)
        if x >= 0:
            return x, y
    return None


def check_edges(rows: Sequence[str]) -> None:
    """Raise MapError unless the border of the grid is entirely walls."""
    if not rows or not rows[0]:
        raise MapError(_ENCLOSURE_ERROR)
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError(_ENCLOSURE_ERROR)
    if set(rows[0]) != {WALL} or set(rows[-1]) != {WALL}:
        raise MapError(_ENCLOSURE_ERROR)
    for row in rows[1:-1]:
        if row[0] != WALL or row[-1] != WALL:
            raise MapError(_ENCLOSURE_ERROR)


def check_path(rows: Sequence[str]) -> None:
    """Raise MapError unless the exit and every coin are reachable.

    The fill spreads from the player through every tile that is not a
    wall; an exit is counted but not passed through.
    """
    total_coins = sum(row.count(COIN) for row in rows)
    grid = [list(row) for row in rows]
    exits = 0
    coins = 0
    start = find_player(rows)
    stack = [start] if start is not None else []
    while stack:
        x, y = stack.pop()
        if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
            continue
        tile = grid[y][x]
        if tile in ("X", WALL):
            continue
        grid[y][x] = "X"
        if tile == EXIT:
            exits += 1
            continue
        if tile == COIN:
            coins += 1
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    if exits != 1:
        raise MapError("Not enough exits reachable")
    if coins != total_coins:
        raise MapError("Not all collectables reachable")