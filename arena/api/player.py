"""Player contract consumed by the contest arena."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from arena.api.messages import Message


@runtime_checkable
class Player(Protocol):
    """Contest player contract."""

    def get_move(self) -> Message:
        """Return the next shot request."""

    def place_ship(self, length: int) -> Message:
        """Return a placement for a ship of the given length."""

    def new_round(self) -> None:
        """Reset every round-scoped structure."""

    def update(self, message: Message) -> None:
        """Fold a shot result or opponent shot notification into player state."""
