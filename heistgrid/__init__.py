"""Tile-based heist puzzle game with map validation, patrolling guards and a move counter."""

__version__ = "1.0.0"

__all__ = ["cli", "counter", "digits", "display", "game", "gamemap", "validate"]