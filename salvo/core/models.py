"""Core domain models used by the agent."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

BOARD_SIZE = 10
MAX_BOARD_SIZE = 25
MIN_SHIP_LENGTH = 2

SHOT_LABEL = "Bang"
SHIP_NAME_PREFIX = "Ship"


class CellState(IntEnum):
    """Per-cell knowledge held by a belief grid."""

    UNKNOWN = 0
    SHIP_PRESENT = 1
    HIT = 2
    KILL = 3
    MISS = 4


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class ShotResult(StrEnum):
    """Result reported for one of our own shots."""

    HIT = "HIT"
    KILL = "KILL"
    MISS = "MISS"

    @property
    def cell_state(self) -> CellState:
        return RESULT_CELL_STATES[self]


RESULT_CELL_STATES: dict[ShotResult, CellState] = {
    ShotResult.HIT: CellState.HIT,
    ShotResult.KILL: CellState.KILL,
    ShotResult.MISS: CellState.MISS,
}


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class ShipPlacement:
    """Placement of a single ship."""

    bow: Coord
    orientation: Orientation
    length: int
    name: str = ""


@dataclass(frozen=True, slots=True)
class ShotOutcome:
    """Result of one of our shots as reported by the arena."""

    coord: Coord
    result: ShotResult


def cells_for_placement(placement: ShipPlacement) -> list[Coord]:
    """Compute occupied cells for a ship placement."""
    result: list[Coord] = []
    for i in range(placement.length):
        if placement.orientation is Orientation.HORIZONTAL:
            result.append(Coord(placement.bow.row, placement.bow.col + i))
        else:
            result.append(Coord(placement.bow.row + i, placement.bow.col))
    return result


def ship_name(index: int) -> str:
    """Sequential per-round ship label: Ship0, Ship1, ..."""
    return f"{SHIP_NAME_PREFIX}{index}"
