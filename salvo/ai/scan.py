"""Systematic sweep cursor for exploratory shots."""

from __future__ import annotations

from dataclasses import dataclass

from salvo.core.models import BOARD_SIZE, MIN_SHIP_LENGTH, Coord


@dataclass(slots=True)
class ScanCursor:
    """Sweep position advanced by a fixed column stride with wraparound.

    When the board size is a multiple of the stride, each wrapped row is
    shifted one column so successive rows are offset from one another.
    """

    size: int = BOARD_SIZE
    stride: int = MIN_SHIP_LENGTH
    row: int = 0
    col: int = 0

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"cursor board size must be positive, got {self.size}")
        if self.stride < 1:
            raise ValueError(f"cursor stride must be positive, got {self.stride}")

    @property
    def position(self) -> Coord:
        return Coord(self.row, self.col)

    def reset(self) -> None:
        self.row = 0
        self.col = 0

    def advance(self) -> None:
        self.col += self.stride
        if self.col < self.size:
            return
        self.col %= self.size
        if self.size % self.stride == 0:
            if self.col + 1 == self.stride:
                self.col = 0
            else:
                self.col += 1
        self.row += 1
        if self.row >= self.size:
            self.row = 0

    def sweep_length(self) -> int:
        """Advances needed to visit each reachable cell once when size % stride == 0."""
        return -(-self.size // self.stride) * self.size
