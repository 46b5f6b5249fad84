# grid.py
from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np  # type: ignore

Coordinate = Tuple[int, int]


class Cell(IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2

    @property
    def label(self) -> str:
        return self.name.lower()


class Grid:
    """
    Square board of cell labels backed by a numpy array.
    Coordinates are (x, y); the array is indexed [y, x].
    """

    def __init__(self, cells: np.ndarray):
        assert cells.ndim == 2 and cells.shape[0] == cells.shape[1], "grid must be square"
        self.cells = cells

    @classmethod
    def create(cls, size: int, occupied: Coordinate) -> "Grid":
        """Fresh size x size grid, empty except for the snake at `occupied`."""
        grid = cls(np.zeros((size, size), dtype=np.int8))
        grid.set(occupied, Cell.SNAKE)
        return grid

    @property
    def size(self) -> int:
        return int(self.cells.shape[0])

    def in_bounds(self, coord: Coordinate) -> bool:
        x, y = coord
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, coord: Coordinate) -> Cell:
        assert self.in_bounds(coord), f"{coord} outside {self.size}x{self.size} grid"
        x, y = coord
        return Cell(int(self.cells[y, x]))

    def set(self, coord: Coordinate, cell: Cell) -> None:
        assert self.in_bounds(coord), f"{coord} outside {self.size}x{self.size} grid"
        x, y = coord
        self.cells[y, x] = cell

    def copy(self) -> "Grid":
        return Grid(self.cells.copy())

    def cells_with(self, cell: Cell) -> List[Coordinate]:
        """All coordinates carrying `cell`, row by row."""
        ys, xs = np.nonzero(self.cells == cell)
        return list(zip(xs.tolist(), ys.tolist()))

    def labels(self) -> List[List[str]]:
        """Rows of label strings ("empty", "snake", "food")."""
        names = [c.label for c in Cell]
        return [[names[v] for v in row] for row in self.cells.tolist()]

    def to_dict(self) -> Dict:
        return {"size": self.size, "cells": self.labels()}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, snake={len(self.cells_with(Cell.SNAKE))})"
