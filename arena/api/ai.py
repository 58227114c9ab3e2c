"""Public AI primitive API contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class Blackboard(Protocol):
    """Per-player scratch storage an agent decides through."""

    def set(self, key: str, value: object) -> None:
        """Set a value for key."""

    def has(self, key: str) -> bool:
        """Return whether key exists."""

    def remove(self, key: str) -> object | None:
        """Remove key and return previous value if present."""

    def clear(self) -> None:
        """Drop every stored value."""


@dataclass(frozen=True, slots=True)
class DecisionContext:
    """Agent decision context for one contest turn."""

    turn: int
    blackboard: Blackboard


class Agent(Protocol):
    """AI agent contract."""

    def decide(self, context: DecisionContext) -> str:
        """Return next action identifier."""


def create_blackboard() -> Blackboard:
    """Create default blackboard implementation."""
    from arena.ai.blackboard import RuntimeBlackboard

    return RuntimeBlackboard()
