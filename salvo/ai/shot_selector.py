"""Per-turn hunt/target shot decision."""

from __future__ import annotations

import logging

from salvo.ai.scan import ScanCursor
from salvo.ai.targeting import TargetTracker
from salvo.core.errors import BoardExhausted, NoFollowUpShot
from salvo.core.grid import BeliefGrid
from salvo.core.models import CellState, Coord

logger = logging.getLogger(__name__)


class ShotSelector:
    """Chooses the next shot from the scan cursor cell of the belief grid."""

    def __init__(self, belief: BeliefGrid, cursor: ScanCursor, tracker: TargetTracker) -> None:
        self._belief = belief
        self._cursor = cursor
        self._tracker = tracker

    def select_shot(self) -> Coord:
        """Return an unexplored cell to fire at.

        Unknown cursor cell: fire there. Hit: follow up along a ship axis.
        Miss/kill, or a hit with no open axis: advance the cursor and look
        again. The cursor has at most size*size positions, so after that many
        advances the whole board is scanned instead.
        """
        for _ in range(self._belief.size * self._belief.size):
            cell = self._cursor.position
            state = self._belief.state(cell.row, cell.col)
            if state is CellState.UNKNOWN:
                return cell
            if state is CellState.HIT:
                try:
                    return self._tracker.follow_up(cell.row, cell.col)
                except NoFollowUpShot:
                    logger.debug("cursor_hit_resolved row=%d col=%d", cell.row, cell.col)
            self._cursor.advance()
        return self._fallback_shot()

    def _fallback_shot(self) -> Coord:
        for hit in self._belief.cells_in(CellState.HIT):
            try:
                target = self._tracker.follow_up(hit.row, hit.col)
            except NoFollowUpShot:
                continue
            logger.warning("shot_fallback_follow_up anchor=(%d,%d)", hit.row, hit.col)
            return target
        unknown = self._belief.cells_in(CellState.UNKNOWN)
        if not unknown:
            raise BoardExhausted("no unexplored cell left on the opponent grid")
        logger.warning("shot_fallback_scan remaining=%d", len(unknown))
        return unknown[0]
