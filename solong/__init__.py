"""Tile-based puzzle game: map loading and checks, game rules, and a pygame window."""

__version__ = "1.0.0"
__all__ = ["mapfile", "game", "display"]