"""Tic-tac-toe board logic with traditional and synchronized game modes."""

__version__ = "1.0.0"
__all__ = ["board", "game"]