"""Mushrooms that appear on the playing field and their worth."""

from __future__ import annotations

import enum

import pygame

MUSHROOM_SIZE = 64


class MushroomType(enum.IntEnum):
    """The kinds of mushroom that can be spawned."""

    WHITE = 0
    BOLETUS = 1
    BIRCH = 2
    CHANTERELLE = 3
    RUSSULA = 4
    TOADSTOOL = 5
    AMANITA = 6


_POINTS = {
    MushroomType.WHITE: 10,
    MushroomType.BOLETUS: 8,
    MushroomType.BIRCH: 8,
    MushroomType.CHANTERELLE: 5,
    MushroomType.RUSSULA: 2,
    MushroomType.TOADSTOOL: -10,
    MushroomType.AMANITA: -10,
}

_TEXTURES = {
    MushroomType.WHITE: "images/mush1.png",
    MushroomType.BOLETUS: "images/mush6.png",
    MushroomType.BIRCH: "images/mush3.png",
    MushroomType.CHANTERELLE: "images/mush2.png",
    MushroomType.RUSSULA: "images/mush7.png",
    MushroomType.TOADSTOOL: "images/mush5.png",
    MushroomType.AMANITA: "images/mush4.png",
}


class Mushroom:
    """A single mushroom occupying a square area of the field."""

    def __init__(self, kind: MushroomType | int, x: int = 0, y: int = 0) -> None:
        self.kind = MushroomType(kind)
        self._rect = pygame.Rect(x, y, MUSHROOM_SIZE, MUSHROOM_SIZE)

    def __repr__(self) -> str:
        return f"Mushroom({self.kind.name}, x={self._rect.x}, y={self._rect.y})"

    def value(self) -> int:
        """Points gained (or lost, when negative) by picking this mushroom."""
        return _POINTS[self.kind]

    def rect(self) -> pygame.Rect:
        """A copy of the area the mushroom occupies."""
        return self._rect.copy()

    def set_position(self, x: int, y: int) -> None:
        """Move the mushroom so that its top-left corner is at (x, y)."""
        self._rect.topleft = (x, y)

    def texture_path(self) -> str:
        """Resource path of the image drawn for this mushroom."""
        return _TEXTURES[self.kind]