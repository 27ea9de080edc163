"""Command line entry point: validate a map and play it."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from heistgrid.display import run_game
from heistgrid.gamemap import load_map
from heistgrid.validate import MapError


def _report(error: MapError) -> None:
    print("Error")
    print(f"{error.message}: {os.strerror(error.code)}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) < 1:
            raise MapError("No map specified", 5)
        if len(args) > 1:
            raise MapError("Too many arguments given", 7)
        game_map = load_map(args[0], True)
        run_game(game_map, True)
    except MapError as error:
        _report(error)
        return error.code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())