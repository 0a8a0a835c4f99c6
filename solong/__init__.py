"""A top-down tile game: map loading and checks, game state, a pygame window and small helpers."""

__version__ = "0.1.0"