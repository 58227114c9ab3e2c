"""Adapter between SweepPlayer and the arena player contract."""

from __future__ import annotations

import logging

from arena.api.messages import (
    SHOT_RESULT_TYPES,
    Direction,
    Message,
    MessageType,
    placement_message,
    shot_message,
)
from arena.api.player import Player
from salvo.ai.sweep_player import SweepPlayer
from salvo.core.models import SHOT_LABEL, Coord, Orientation, ShotResult

logger = logging.getLogger(__name__)

_DIRECTIONS: dict[Orientation, Direction] = {
    Orientation.HORIZONTAL: Direction.HORIZONTAL,
    Orientation.VERTICAL: Direction.VERTICAL,
}

_RESULTS: dict[MessageType, ShotResult] = {
    MessageType.HIT: ShotResult.HIT,
    MessageType.KILL: ShotResult.KILL,
    MessageType.MISS: ShotResult.MISS,
}


class ContestPlayer(Player):
    """Player implementation that speaks arena messages."""

    def __init__(self, player: SweepPlayer, *, shot_label: str = SHOT_LABEL) -> None:
        self._player = player
        self._shot_label = shot_label

    @property
    def player(self) -> SweepPlayer:
        return self._player

    def get_move(self) -> Message:
        shot = self._player.next_shot()
        return shot_message(shot.row, shot.col, self._shot_label)

    def place_ship(self, length: int) -> Message:
        placement = self._player.place_ship(length)
        return placement_message(
            placement.bow.row,
            placement.bow.col,
            placement.name,
            _DIRECTIONS[placement.orientation],
            placement.length,
        )

    def new_round(self) -> None:
        self._player.new_round()

    def update(self, message: Message) -> None:
        if message.message_type is MessageType.ROUND_START:
            self._player.new_round()
        elif message.message_type in SHOT_RESULT_TYPES:
            self._player.notify_result(Coord(message.row, message.col), _RESULTS[message.message_type])
        elif message.message_type is MessageType.OPPONENT_SHOT:
            self._player.notify_opponent_shot(Coord(message.row, message.col))
        else:
            logger.debug("update_ignored type=%s", message.message_type.value)
