"""Arcade mushroom-picking game: round logic, records table, volume settings and a pygame front end."""

__version__ = "0.1.0"