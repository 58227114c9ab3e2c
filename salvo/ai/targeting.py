"""Follow-up targeting around confirmed hits."""

from __future__ import annotations

import logging

from salvo.core.errors import NoFollowUpShot
from salvo.core.grid import BeliefGrid
from salvo.core.models import CellState, Coord

logger = logging.getLogger(__name__)

# Search priority: down, right, left, up.
FOLLOW_UP_DIRECTIONS: tuple[tuple[str, int, int], ...] = (
    ("down", 1, 0),
    ("right", 0, 1),
    ("left", 0, -1),
    ("up", -1, 0),
)

_BLOCKING_STATES = frozenset({CellState.MISS, CellState.KILL})


class TargetTracker:
    """Walks outward from a hit to find the live edge of a partially sunk ship."""

    def __init__(self, belief: BeliefGrid) -> None:
        self._belief = belief

    def follow_up(self, row: int, col: int) -> Coord:
        """Return the next cell to shoot around the hit at ``(row, col)``."""
        for name, row_delta, col_delta in FOLLOW_UP_DIRECTIONS:
            found = self.search(row, col, row_delta, col_delta)
            if found is not None:
                logger.debug("follow_up anchor=(%d,%d) direction=%s target=(%d,%d)", row, col, name, found.row, found.col)
                return found
        raise NoFollowUpShot(row, col)

    def search(self, row: int, col: int, row_delta: int, col_delta: int) -> Coord | None:
        """Walk one direction through hits; return the first unknown cell or None."""
        if row_delta == 0 and col_delta == 0:
            raise ValueError("search direction must be non-zero")
        distance = 1
        while True:
            r = row + row_delta * distance
            c = col + col_delta * distance
            if not self._belief.in_bounds(r, c):
                return None
            state = self._belief.state(r, c)
            if state is CellState.UNKNOWN:
                return Coord(r, c)
            if state in _BLOCKING_STATES:
                return None
            distance += 1
