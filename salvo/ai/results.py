"""Folds shot notifications into the agent's grids."""

from __future__ import annotations

from salvo.core.grid import BeliefGrid, ShotCounterGrid
from salvo.core.models import Coord, ShotOutcome


class ResultApplier:
    """Writes our shot outcomes and counts opponent shots."""

    def __init__(self, belief: BeliefGrid, opponent_shots: ShotCounterGrid) -> None:
        self._belief = belief
        self._opponent_shots = opponent_shots

    def apply_result(self, outcome: ShotOutcome) -> None:
        """Overwrite the belief cell with the reported outcome."""
        self._belief.mark(outcome.coord.row, outcome.coord.col, outcome.result.cell_state)

    def apply_opponent_shot(self, coord: Coord) -> int:
        """Count an opponent shot; returns how often that cell has been targeted."""
        return self._opponent_shots.record(coord.row, coord.col)
