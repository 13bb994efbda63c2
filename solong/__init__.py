"""Tile-based puzzle game: load a .ber map, collect every item, reach the exit."""

__version__ = "1.0.0"
__all__ = ["animation", "display", "game", "maps", "sprites"]