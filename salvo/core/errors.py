"""Agent error taxonomy."""

from __future__ import annotations


class InvalidShipLength(ValueError):
    """Requested ship length can never fit on the board."""

    def __init__(self, length: int, board_size: int) -> None:
        super().__init__(f"ship length {length} does not fit a {board_size}x{board_size} board")
        self.length = length
        self.board_size = board_size


class BoardSizeError(ValueError):
    """Board size is outside the supported range."""

    def __init__(self, size: int, max_size: int) -> None:
        super().__init__(f"board size {size} outside supported range 1..{max_size}")
        self.size = size
        self.max_size = max_size


class NoFollowUpShot(LookupError):
    """No axis around a hit leads to an unexplored cell."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"no open axis around hit at ({row}, {col})")
        self.row = row
        self.col = col


class NoPlacementAvailable(RuntimeError):
    """No free run of the requested length remains on the fleet grid."""

    def __init__(self, length: int) -> None:
        super().__init__(f"no free position left for a ship of length {length}")
        self.length = length


class BoardExhausted(RuntimeError):
    """Every opponent cell has already been resolved."""
