"""Game state and rules: player moves, enemy patrols and the end of a run."""

from __future__ import annotations

from enum import Enum

from heistgrid.gamemap import MAX_MOVES, GameMap
from heistgrid.validate import COIN, EXIT, FLOOR, PLAYER, WALL

_RESULTS_HEADER = "\n-----Mission Results------\n\n"
_RESULTS_RULE = "-----------------------------\n"

# Enemies that have bounced this turn are written in lower case.
_ENEMY_TILES = "URDLurdl"
_ENEMY_STEP = {"U": (0, -1), "R": (1, 0), "L": (-1, 0), "D": (0, 1)}
_BOUNCED = {"U": "d", "D": "u", "R": "l", "L": "r"}


class Outcome(Enum):
    """How a run ended."""

    WIN = "win"
    QUIT = "quit"
    KILLED = "killed"


class Direction(Enum):
    """A step of the player, as (dx, dy)."""

    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class GameOver(Exception):
    """Raised when the run ends; carries the outcome and the printed report."""

    def __init__(self, outcome: Outcome, report: str) -> None:
        super().__init__(outcome.value)
        self.outcome = outcome
        self.report = report


class Game:
    """A running game on a validated map."""

    def __init__(self, game_map: GameMap, with_enemies: bool) -> None:
        self.map = game_map
        self.with_enemies = with_enemies
        self.coins_got = 0
        self.enemies_got = 0
        self.moves = 0

    def move(self, direction: Direction) -> bool:
        """Try to move the player one tile; return False if the move is refused.

        Prints the status after every accepted move and raises GameOver
        when the exit is reached, the move limit is hit or an enemy
        catches the player.
        """
        game_map = self.map
        x = game_map.player_x + direction.dx
        y = game_map.player_y + direction.dy
        target = game_map.grid[y][x]
        if target == WALL:
            return False
        if target == EXIT and self.coins_got != game_map.coins_total:
            return False
        if target == COIN:
            self.coins_got += 1
        elif self.with_enemies and target in _ENEMY_TILES:
            self.enemies_got += 1
        self.moves += 1
        print(self.status_message(), end="")
        if target == EXIT:
            self._finish(Outcome.WIN)
        if self.moves >= MAX_MOVES:
            self._finish(Outcome.QUIT)
        game_map.grid[game_map.player_y][game_map.player_x] = FLOOR
        game_map.grid[y][x] = PLAYER
        game_map.player_x = x
        game_map.player_y = y
        if self.with_enemies:
            self.step_enemies()
        return True

    def step_enemies(self) -> None:
        """Let every enemy take one turn, then ready the ones that bounced.

        Down and right walkers are handled from the bottom right corner,
        up and left walkers from the top left, so no enemy moves twice.
        """
        for kind in "DR":
            for x, y in reversed(list(self._interior())):
                if self.map.grid[y][x] == kind:
                    self._enemy_turn(x, y, kind)
        for kind in "UL":
            for x, y in self._interior():
                if self.map.grid[y][x] == kind:
                    self._enemy_turn(x, y, kind)
        for x, y in self._interior():
            tile = self.map.grid[y][x]
            if tile in "urdl":
                self.map.grid[y][x] = tile.upper()

    def quit(self) -> None:
        """Abort the run."""
        self._finish(Outcome.QUIT)

    def status_message(self) -> str:
        """Return the mission status shown after each move."""
        got = self.coins_got
        total = self.map.coins_total
        lines = ["\n" * 18, "Current Mission:\n"]
        if got < total:
            lines.append("Collect all the Endo while staying undetected\n\n")
        else:
            lines.append("Get to the exit and escape with the loot\n\n")
        lines.append(" ________________________\n")
        lines.append("/                        \\\n")
        lines.append(f"|  Moves: {self.moves}\n")
        lines.append("|------------------------|\n")
        lines.append(f"|  {got} / {total} Endo collected\n")
        if got >= total:
            lines.append("\\__EXTRACTION_IS_READY___/\n")
        else:
            lines.append("\\________________________/\n")
        return "".join(lines)

    def report(self, outcome: Outcome) -> str:
        """Return the closing report for ``outcome``."""
        if outcome is Outcome.QUIT:
            return (
                _RESULTS_HEADER
                + "You have aborted the mission, Tenno.\n"
                + "The Grineer will get to keep their Endo for another day.\n\n"
                + _RESULTS_RULE
            )
        if outcome is Outcome.KILLED:
            return (
                _RESULTS_HEADER
                + "You were caught and defeated, Tenno.\n"
                + "Next time be more carefull around "
                + f"[{self.map.player_x}|{self.map.player_y}].\n\n"
                + _RESULTS_RULE
            )
        got = self.enemies_got
        total = self.map.enemies_total
        text = _RESULTS_HEADER
        text += f"Well done Tenno. You reached the exit in {self.moves} moves\n"
        text += f"You managed to bring back all {self.map.coins_total} Endo\n"
        if got > 0:
            text += f"As well as defeating {got}/{total} Grineer\n"
        if total > 0 and got == 0:
            text += "\nPACIFISM Achievement unlocked\n"
        elif total > 0 and got == total:
            text += "\nGENOCIDE Achievement unlocked\n"
        return text + "\n" + _RESULTS_RULE

    def _interior(self):
        for y in range(1, self.map.height - 1):
            for x in range(1, self.map.width - 1):
                yield x, y

    def _enemy_turn(self, x: int, y: int, kind: str) -> None:
        dx, dy = _ENEMY_STEP[kind]
        tx, ty = x + dx, y + dy
        target = self.map.grid[ty][tx]
        if target == PLAYER:
            self._finish(Outcome.KILLED)
        if target == FLOOR:
            self.map.grid[y][x] = FLOOR
            self.map.grid[ty][tx] = kind
        else:
            self.map.grid[y][x] = _BOUNCED[kind]

    def _finish(self, outcome: Outcome) -> None:
        text = self.report(outcome)
        print(text, end="")
        raise GameOver(outcome, text)