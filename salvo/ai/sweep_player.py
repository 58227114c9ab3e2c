"""Sweep-and-follow contest player."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from arena.runtime.debug_config import load_debug_config
from salvo.ai.placement import DEFAULT_PLACEMENT_ATTEMPTS, PlacementEngine
from salvo.ai.results import ResultApplier
from salvo.ai.scan import ScanCursor
from salvo.ai.shot_selector import ShotSelector
from salvo.ai.strategy import AIStrategy
from salvo.ai.targeting import TargetTracker
from salvo.core.errors import BoardSizeError
from salvo.core.grid import BeliefGrid, ShotCounterGrid
from salvo.core.models import (
    MAX_BOARD_SIZE,
    MIN_SHIP_LENGTH,
    Coord,
    ShipPlacement,
    ShotOutcome,
    ShotResult,
)

if TYPE_CHECKING:
    from salvo.infra.config import AgentConfig

logger = logging.getLogger(__name__)


class SweepPlayer(AIStrategy):
    """Hunts with a strided sweep, targets along ship axes, places ships at random.

    The player owns both belief grids, the opponent-shot counters, the scan
    cursor and the placed-ship counter. Components receive the grids by
    reference; ``new_round`` resets all of them in place.
    """

    def __init__(
        self,
        board_size: int,
        rng: random.Random,
        *,
        min_ship_length: int = MIN_SHIP_LENGTH,
        max_board_size: int = MAX_BOARD_SIZE,
        placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
    ) -> None:
        super().__init__()
        if board_size < 1 or board_size > max_board_size:
            raise BoardSizeError(board_size, max_board_size)
        if min_ship_length < 1:
            raise ValueError(f"minimum ship length must be positive, got {min_ship_length}")

        self._size = board_size
        self._belief = BeliefGrid(size=board_size)
        self._fleet = BeliefGrid(size=board_size)
        self._opponent_shots = ShotCounterGrid(size=board_size)
        self._cursor = ScanCursor(size=board_size, stride=min_ship_length)
        self._tracker = TargetTracker(self._belief)
        self._selector = ShotSelector(self._belief, self._cursor, self._tracker)
        self._placement = PlacementEngine(self._fleet, rng, max_attempts=placement_attempts)
        self._results = ResultApplier(self._belief, self._opponent_shots)
        self._debug = load_debug_config()
        self._decision_level = logging.INFO if self._debug.decision_trace_enabled else logging.DEBUG
        self._round = 0

    @classmethod
    def from_config(cls, config: AgentConfig, rng: random.Random) -> SweepPlayer:
        """Build a player from loaded agent configuration."""
        return cls(
            config.board_size,
            rng,
            min_ship_length=config.min_ship_length,
            max_board_size=config.max_board_size,
            placement_attempts=config.placement_attempts,
        )

    @property
    def board_size(self) -> int:
        return self._size

    @property
    def belief(self) -> BeliefGrid:
        return self._belief

    @property
    def fleet(self) -> BeliefGrid:
        return self._fleet

    @property
    def opponent_shots(self) -> ShotCounterGrid:
        return self._opponent_shots

    @property
    def cursor(self) -> ScanCursor:
        return self._cursor

    @property
    def tracker(self) -> TargetTracker:
        return self._tracker

    @property
    def ships_placed(self) -> int:
        return self._placement.ships_placed

    @property
    def placements(self) -> tuple[ShipPlacement, ...]:
        return self._placement.placements

    @property
    def round_number(self) -> int:
        return self._round

    def new_round(self) -> None:
        """Reinitialize every round-scoped structure in place."""
        self._belief.reset()
        self._fleet.reset()
        self._opponent_shots.reset()
        self._cursor.reset()
        self._placement.reset()
        self.reset_turns()
        self._round += 1
        logger.log(self._decision_level, "round_start round=%d board_size=%d", self._round, self._size)

    def choose_shot(self) -> Coord:
        shot = self._selector.select_shot()
        logger.log(
            self._decision_level,
            "shot_selected round=%d turn=%d row=%d col=%d cursor=(%d,%d)",
            self._round,
            self.turn,
            shot.row,
            shot.col,
            self._cursor.row,
            self._cursor.col,
        )
        return shot

    def notify_result(self, coord: Coord, result: ShotResult) -> None:
        self._results.apply_result(ShotOutcome(coord, result))

    def notify_opponent_shot(self, coord: Coord) -> None:
        count = self._results.apply_opponent_shot(coord)
        level = logging.INFO if self._debug.opponent_shot_trace_enabled else logging.DEBUG
        logger.log(level, "opponent shot at %d, %d", coord.row, coord.col, extra={"times_targeted": count})

    def place_ship(self, length: int) -> ShipPlacement:
        """Place a ship of ``length`` on our fleet grid; raises InvalidShipLength."""
        placement = self._placement.place_ship(length)
        logger.log(
            self._decision_level,
            "ship_placed name=%s row=%d col=%d orientation=%s length=%d",
            placement.name,
            placement.bow.row,
            placement.bow.col,
            placement.orientation.value,
            placement.length,
        )
        return placement
