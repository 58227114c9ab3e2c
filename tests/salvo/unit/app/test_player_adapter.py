import pytest

from arena.api.messages import Direction, Message, MessageType
from arena.api.player import Player
from salvo.app.player_adapter import ContestPlayer
from salvo.core.errors import InvalidShipLength
from salvo.core.models import CellState


@pytest.fixture
def contest_player(player_factory) -> ContestPlayer:
    return ContestPlayer(player_factory())


def test_contest_player_satisfies_player_contract(contest_player: ContestPlayer) -> None:
    assert isinstance(contest_player, Player)


def test_get_move_returns_labelled_shot(contest_player: ContestPlayer) -> None:
    message = contest_player.get_move()
    assert message.message_type is MessageType.SHOT
    assert (message.row, message.col) == (0, 0)
    assert message.text == "Bang"


def test_place_ship_returns_named_placement(contest_player: ContestPlayer) -> None:
    first = contest_player.place_ship(4)
    second = contest_player.place_ship(3)
    assert first.message_type is MessageType.PLACE_SHIP
    assert first.text == "Ship0"
    assert second.text == "Ship1"
    assert first.length == 4
    assert first.direction in (Direction.HORIZONTAL, Direction.VERTICAL)
    assert contest_player.player.fleet.count(CellState.SHIP_PRESENT) == 7


def test_place_ship_too_long_raises(contest_player: ContestPlayer) -> None:
    with pytest.raises(InvalidShipLength):
        contest_player.place_ship(11)


@pytest.mark.parametrize(
    ("message_type", "state"),
    [
        (MessageType.HIT, CellState.HIT),
        (MessageType.KILL, CellState.KILL),
        (MessageType.MISS, CellState.MISS),
    ],
)
def test_update_applies_shot_results(contest_player: ContestPlayer, message_type, state) -> None:
    contest_player.update(Message(message_type, row=2, col=6))
    assert contest_player.player.belief.state(2, 6) is state


def test_update_counts_opponent_shots(contest_player: ContestPlayer) -> None:
    contest_player.update(Message(MessageType.OPPONENT_SHOT, row=9, col=9))
    assert contest_player.player.opponent_shots.count(9, 9) == 1
    assert contest_player.player.belief.count(CellState.UNKNOWN) == 100


def test_round_start_message_resets_state(contest_player: ContestPlayer) -> None:
    contest_player.place_ship(5)
    contest_player.update(Message(MessageType.MISS, row=0, col=0))
    contest_player.update(Message(MessageType.ROUND_START))
    assert contest_player.player.ships_placed == 0
    assert contest_player.player.belief.count(CellState.UNKNOWN) == 100
    assert contest_player.player.round_number == 1


def test_outbound_message_types_are_ignored_on_update(contest_player: ContestPlayer) -> None:
    contest_player.update(Message(MessageType.SHOT, row=1, col=1, text="Bang"))
    assert contest_player.player.belief.count(CellState.UNKNOWN) == 100


def test_get_move_runs_one_agent_turn_per_call(contest_player: ContestPlayer) -> None:
    first = contest_player.get_move()
    contest_player.update(Message(MessageType.MISS, row=first.row, col=first.col))
    second = contest_player.get_move()
    assert (second.row, second.col) == (0, 2)
    assert contest_player.player.turn == 2
    assert not contest_player.player.blackboard.has(contest_player.player.SHOT_KEY)
