"""Turn-by-turn shot decisions routed through the arena agent contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from arena.api.ai import Agent, Blackboard, DecisionContext, create_blackboard
from salvo.core.models import Coord, ShotResult


class AIStrategy(Agent, ABC):
    """Shot strategy that decides through its own blackboard.

    Each turn ``next_shot`` asks ``decide`` for an action; the chosen shot and
    the turn it was decided on are parked on the blackboard and taken back
    out before the shot leaves the player. A decision may not be left pending
    across turns.
    """

    ACTION_FIRE = "fire"
    SHOT_KEY = "salvo.ai.shot"
    TURN_KEY = "salvo.ai.turn"

    def __init__(self) -> None:
        self._blackboard = create_blackboard()
        self._turn = 0

    @property
    def blackboard(self) -> Blackboard:
        return self._blackboard

    @property
    def turn(self) -> int:
        """Turn number of the latest decision this round; 0 before the first."""
        return self._turn

    def next_shot(self) -> Coord:
        """Run one decision turn and return the shot it settled on."""
        turn = self._turn + 1
        self._turn = turn
        action = self.decide(DecisionContext(turn=turn, blackboard=self._blackboard))
        if action != self.ACTION_FIRE:
            raise RuntimeError(f"unsupported strategy action {action!r}")
        return self.take_decided_shot(self._blackboard, turn)

    def decide(self, context: DecisionContext) -> str:
        if context.blackboard.has(self.SHOT_KEY):
            raise RuntimeError("previous shot decision was never taken")
        context.blackboard.set(self.SHOT_KEY, self.choose_shot())
        context.blackboard.set(self.TURN_KEY, context.turn)
        return self.ACTION_FIRE

    @classmethod
    def take_decided_shot(cls, blackboard: Blackboard, turn: int) -> Coord:
        """Remove and return the shot decided for ``turn``."""
        shot = blackboard.remove(cls.SHOT_KEY)
        decided_turn = blackboard.remove(cls.TURN_KEY)
        if not isinstance(shot, Coord):
            raise TypeError("expected Coord shot in AI blackboard")
        if decided_turn != turn:
            raise LookupError(f"pending shot was decided on turn {decided_turn}, not {turn}")
        return shot

    def reset_turns(self) -> None:
        """Drop pending decisions and restart turn numbering."""
        self._blackboard.clear()
        self._turn = 0

    @abstractmethod
    def choose_shot(self) -> Coord:
        """Return next coordinate to fire."""

    @abstractmethod
    def notify_result(self, coord: Coord, result: ShotResult) -> None:
        """Update strategy state with shot result."""
