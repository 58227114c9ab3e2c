import pytest

from salvo.ai.scan import ScanCursor
from salvo.core.models import Coord


def _walk(cursor: ScanCursor, steps: int) -> list[Coord]:
    visited = [cursor.position]
    for _ in range(steps):
        cursor.advance()
        visited.append(cursor.position)
    return visited


def test_ten_by_ten_stride_two_sequence() -> None:
    cursor = ScanCursor(size=10, stride=2)
    assert _walk(cursor, 11) == [
        Coord(0, 0),
        Coord(0, 2),
        Coord(0, 4),
        Coord(0, 6),
        Coord(0, 8),
        Coord(1, 1),
        Coord(1, 3),
        Coord(1, 5),
        Coord(1, 7),
        Coord(1, 9),
        Coord(2, 0),
        Coord(2, 2),
    ]


def test_aligned_board_offsets_successive_rows() -> None:
    cursor = ScanCursor(size=10, stride=2)
    rows: dict[int, set[int]] = {}
    for cell in _walk(cursor, 49):
        rows.setdefault(cell.row, set()).add(cell.col % 2)
    assert rows[0] == {0}
    assert rows[1] == {1}
    assert rows[0] != rows[1]


@pytest.mark.parametrize(("size", "stride"), [(10, 2), (9, 3), (6, 3), (8, 4), (5, 1)])
def test_full_sweep_visits_each_reachable_cell_once(size: int, stride: int) -> None:
    cursor = ScanCursor(size=size, stride=stride)
    steps = cursor.sweep_length()
    visited = _walk(cursor, steps - 1)
    assert len(visited) == steps
    assert len(set(visited)) == steps
    cursor.advance()
    assert cursor.position == Coord(0, 0)


def test_aligned_sweeps_cover_each_row_phase() -> None:
    cursor = ScanCursor(size=9, stride=3)
    visited = set(_walk(cursor, cursor.sweep_length() - 1))
    for row in range(3):
        assert {col % 3 for r, col in ((c.row, c.col) for c in visited) if r == row} == {row % 3}


def test_unaligned_board_wraps_with_natural_offset() -> None:
    cursor = ScanCursor(size=10, stride=3)
    assert _walk(cursor, 5) == [
        Coord(0, 0),
        Coord(0, 3),
        Coord(0, 6),
        Coord(0, 9),
        Coord(1, 2),
        Coord(1, 5),
    ]


def test_row_wraps_to_top() -> None:
    cursor = ScanCursor(size=4, stride=2, row=3, col=3)
    cursor.advance()
    assert cursor.position == Coord(0, 0)


def test_reset_returns_to_origin() -> None:
    cursor = ScanCursor(size=10, stride=2)
    for _ in range(7):
        cursor.advance()
    cursor.reset()
    assert cursor.position == Coord(0, 0)


def test_stride_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ScanCursor(size=10, stride=0)
