"""Terminal snake game with JSON level cards, a level editor and per-level high-score tables."""

__version__ = "0.1.0"