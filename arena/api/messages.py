"""Typed messages exchanged between the contest arena and a player."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class MessageType(StrEnum):
    """Kind of contest message."""

    SHOT = "SHOT"
    PLACE_SHIP = "PLACE_SHIP"
    HIT = "HIT"
    KILL = "KILL"
    MISS = "MISS"
    OPPONENT_SHOT = "OPPONENT_SHOT"
    ROUND_START = "ROUND_START"


class Direction(StrEnum):
    """Ship direction carried by placement messages."""

    NONE = "NONE"
    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


SHOT_RESULT_TYPES: frozenset[MessageType] = frozenset(
    {MessageType.HIT, MessageType.KILL, MessageType.MISS}
)


@dataclass(frozen=True, slots=True)
class Message:
    """One contest message.

    Row and column default to -1 for messages that carry no coordinate.
    """

    message_type: MessageType
    row: int = -1
    col: int = -1
    text: str = ""
    direction: Direction = Direction.NONE
    length: int = 0


def shot_message(row: int, col: int, label: str) -> Message:
    """Build an outbound shot request."""
    return Message(MessageType.SHOT, row=row, col=col, text=label)


def placement_message(row: int, col: int, name: str, direction: Direction, length: int) -> Message:
    """Build an outbound ship placement response."""
    if direction is Direction.NONE:
        raise ValueError("placement requires a ship direction")
    return Message(
        MessageType.PLACE_SHIP,
        row=row,
        col=col,
        text=name,
        direction=direction,
        length=length,
    )
