"""Randomized, collision-checked placement of our own fleet."""

from __future__ import annotations

import logging
import random

from salvo.core.errors import InvalidShipLength, NoPlacementAvailable
from salvo.core.grid import BeliefGrid
from salvo.core.models import (
    CellState,
    Coord,
    Orientation,
    ShipPlacement,
    cells_for_placement,
    ship_name,
)

logger = logging.getLogger(__name__)

DEFAULT_PLACEMENT_ATTEMPTS = 1000


class PlacementEngine:
    """Places ships on the fleet grid one request at a time.

    Random sampling mirrors a uniform choice of orientation and a fitting
    anchor. Sampling is capped at ``max_attempts``; after that every legal
    position is enumerated and one is drawn from the same RNG, so a request
    either succeeds or raises ``NoPlacementAvailable``.
    """

    def __init__(
        self,
        fleet: BeliefGrid,
        rng: random.Random,
        *,
        max_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
    ) -> None:
        self._fleet = fleet
        self._rng = rng
        self._max_attempts = max(1, max_attempts)
        self._placements: list[ShipPlacement] = []

    @property
    def ships_placed(self) -> int:
        return len(self._placements)

    @property
    def placements(self) -> tuple[ShipPlacement, ...]:
        return tuple(self._placements)

    def reset(self) -> None:
        """Forget ships placed this round; the fleet grid is reset by its owner."""
        self._placements.clear()

    def place_ship(self, length: int) -> ShipPlacement:
        """Choose, validate and commit a position for a ship of ``length``."""
        size = self._fleet.size
        if length < 1 or length > size:
            raise InvalidShipLength(length, size)

        name = ship_name(self.ships_placed)
        for attempt in range(1, self._max_attempts + 1):
            candidate = self._choose_values(length, name)
            if self.position_ok(candidate):
                logger.debug("ship_placed_random name=%s attempts=%d", name, attempt)
                return self._commit(candidate)

        candidates = self.candidate_placements(length, name=name)
        if not candidates:
            raise NoPlacementAvailable(length)
        logger.warning(
            "placement_fallback_enumeration length=%d attempts=%d candidates=%d",
            length,
            self._max_attempts,
            len(candidates),
        )
        return self._commit(self._rng.choice(candidates))

    def position_ok(self, placement: ShipPlacement) -> bool:
        """Return whether the full run lies on the grid and is collision-free."""
        return self._fleet.is_clear(cells_for_placement(placement))

    def candidate_placements(self, length: int, *, name: str = "") -> list[ShipPlacement]:
        """Enumerate every legal placement for ``length`` on the current fleet grid."""
        size = self._fleet.size
        if length < 1 or length > size:
            return []
        candidates: list[ShipPlacement] = []
        for orientation in (Orientation.HORIZONTAL, Orientation.VERTICAL):
            max_row = size if orientation is Orientation.HORIZONTAL else size - length + 1
            max_col = size - length + 1 if orientation is Orientation.HORIZONTAL else size
            for row in range(max_row):
                for col in range(max_col):
                    placement = ShipPlacement(Coord(row, col), orientation, length, name)
                    if self.position_ok(placement):
                        candidates.append(placement)
        return candidates

    def _choose_values(self, length: int, name: str) -> ShipPlacement:
        size = self._fleet.size
        orientation = self._rng.choice((Orientation.HORIZONTAL, Orientation.VERTICAL))
        if orientation is Orientation.HORIZONTAL:
            row = self._rng.randrange(size)
            col = self._rng.randrange(size + 1 - length)
        else:
            row = self._rng.randrange(size + 1 - length)
            col = self._rng.randrange(size)
        return ShipPlacement(Coord(row, col), orientation, length, name)

    def _commit(self, placement: ShipPlacement) -> ShipPlacement:
        for cell in cells_for_placement(placement):
            self._fleet.mark(cell.row, cell.col, CellState.SHIP_PRESENT)
        self._placements.append(placement)
        return placement
