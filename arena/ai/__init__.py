"""AI primitive implementations."""

from arena.ai.blackboard import RuntimeBlackboard

__all__ = ["RuntimeBlackboard"]
