"""The sliding-tile puzzle board."""

from __future__ import annotations

import random
from typing import Iterator, Optional

MIN_SIZE = 2
MAX_SIZE = 8

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class InvalidMove(ValueError):
    """Raised when a tile that does not touch the blank space is slid."""


class Board:
    """A square board of numbered tiles with one blank space."""

    def __init__(self, size: int) -> None:
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError(f"board size must be from {MIN_SIZE} to {MAX_SIZE}, got {size}")
        self.size = size
        self.blank_tile = size * size
        self._tiles = [
            [row * size + column + 1 for column in range(size)] for row in range(size)
        ]
        self._blank = (size - 1, size - 1)

    @property
    def blank(self) -> tuple[int, int]:
        """Row and column of the blank space."""
        return self._blank

    def tile_at(self, row: int, column: int) -> Optional[int]:
        """Return the tile at a cell, or None for the blank space."""
        if not (0 <= row < self.size and 0 <= column < self.size):
            raise IndexError(f"cell ({row}, {column}) is outside the board")
        value = self._tiles[row][column]
        return None if value == self.blank_tile else value

    def _inside(self, row: int, column: int) -> bool:
        return 0 <= row < self.size and 0 <= column < self.size

    def _neighbours(self) -> Iterator[tuple[int, int]]:
        row, column = self._blank
        for d_row, d_column in _DIRECTIONS:
            target = (row + d_row, column + d_column)
            if self._inside(*target):
                yield target

    def _swap_blank(self, target: tuple[int, int]) -> None:
        row, column = self._blank
        t_row, t_column = target
        self._tiles[row][column], self._tiles[t_row][t_column] = (
            self._tiles[t_row][t_column],
            self._tiles[row][column],
        )
        self._blank = target

    def slide(self, tile: int) -> None:
        """Move ``tile`` into the blank space if the two are adjacent."""
        if tile != self.blank_tile:
            for row, column in self._neighbours():
                if self._tiles[row][column] == tile:
                    self._swap_blank((row, column))
                    return
        raise InvalidMove(f"tile {tile} is not next to the blank space")

    def is_solved(self) -> bool:
        """True when every tile is in ascending order with the blank last."""
        values = (value for row in self._tiles for value in row)
        return all(value == expected for expected, value in enumerate(values, start=1))

    def shuffle(self, rng: random.Random, base: int) -> None:
        """Make ``base ** size`` random moves, then park the blank bottom-right."""
        if base < 0:
            raise ValueError("shuffle base must not be negative")
        remaining = base**self.size
        while remaining:
            d_row, d_column = rng.choice(_DIRECTIONS)
            row, column = self._blank
            target = (row + d_row, column + d_column)
            if self._inside(*target):
                self._swap_blank(target)
                remaining -= 1

        last = self.size - 1
        while self._blank[0] != last:
            self._swap_blank((self._blank[0] + 1, self._blank[1]))
        while self._blank[1] != last:
            self._swap_blank((self._blank[0], self._blank[1] + 1))

    def render(self) -> str:
        """Return the board as text, one row per line with '_' for the blank."""
        lines = []
        for row in self._tiles:
            cells = "".join(
                "  _" if value == self.blank_tile else f"{value:3d}" for value in row
            )
            lines.append(cells + "\n\n")
        return "".join(lines)