"""Terminal sliding-tile puzzle and menu-driven music player."""

__version__ = "0.1.0"
__all__ = ["board", "library", "menu", "player", "puzzle_game"]