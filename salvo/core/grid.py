"""Belief grid representation and mutation helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from salvo.core.models import BOARD_SIZE, CellState, Coord


@dataclass(slots=True)
class BeliefGrid:
    """Numpy-backed N x N grid of cell states."""

    size: int = BOARD_SIZE
    cells: np.ndarray = field(
        default_factory=lambda: np.full((BOARD_SIZE, BOARD_SIZE), CellState.UNKNOWN, dtype=np.int8)
    )

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"grid size must be positive, got {self.size}")
        if self.cells.shape != (self.size, self.size):
            self.cells = np.full((self.size, self.size), CellState.UNKNOWN, dtype=np.int8)

    def reset(self) -> None:
        """Return every cell to the clear state in place."""
        self.cells.fill(CellState.UNKNOWN)

    def in_bounds(self, row: int, col: int) -> bool:
        """Return whether the coordinate is in grid bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def state(self, row: int, col: int) -> CellState:
        _require_on_grid(self.size, row, col)
        return CellState(int(self.cells[row, col]))

    def mark(self, row: int, col: int, state: CellState) -> None:
        _require_on_grid(self.size, row, col)
        self.cells[row, col] = state

    def is_clear(self, cells: Iterable[Coord]) -> bool:
        """Return whether every cell lies on the grid and is still unknown."""
        for cell in cells:
            if not self.in_bounds(cell.row, cell.col):
                return False
            if self.cells[cell.row, cell.col] != CellState.UNKNOWN:
                return False
        return True

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.cells == state))

    def cells_in(self, state: CellState) -> list[Coord]:
        """Return coordinates holding the given state in row-major order."""
        rows, cols = np.nonzero(self.cells == state)
        return [Coord(int(r), int(c)) for r, c in zip(rows, cols)]

    def snapshot(self) -> np.ndarray:
        return self.cells.copy()


@dataclass(slots=True)
class ShotCounterGrid:
    """Per-cell count of opponent shots against our board."""

    size: int = BOARD_SIZE
    counts: np.ndarray = field(default_factory=lambda: np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int32))

    def __post_init__(self) -> None:
        if self.counts.shape != (self.size, self.size):
            self.counts = np.zeros((self.size, self.size), dtype=np.int32)

    def reset(self) -> None:
        self.counts.fill(0)

    def record(self, row: int, col: int) -> int:
        """Increment the counter at a cell and return the new count."""
        _require_on_grid(self.size, row, col)
        self.counts[row, col] += 1
        return int(self.counts[row, col])

    def count(self, row: int, col: int) -> int:
        _require_on_grid(self.size, row, col)
        return int(self.counts[row, col])

    def total(self) -> int:
        return int(self.counts.sum())


def _require_on_grid(size: int, row: int, col: int) -> None:
    # Negative indices would wrap around in numpy.
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"({row}, {col}) is off a {size}x{size} grid")
