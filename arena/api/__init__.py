"""Public arena API contracts."""

from arena.api.ai import Agent, Blackboard, DecisionContext, create_blackboard
from arena.api.logging import ArenaLoggingConfig, JsonFormatter, configure_logging, get_logger
from arena.api.messages import (
    SHOT_RESULT_TYPES,
    Direction,
    Message,
    MessageType,
    placement_message,
    shot_message,
)
from arena.api.player import Player

__all__ = [
    "Agent",
    "ArenaLoggingConfig",
    "Blackboard",
    "DecisionContext",
    "Direction",
    "JsonFormatter",
    "Message",
    "MessageType",
    "Player",
    "SHOT_RESULT_TYPES",
    "configure_logging",
    "create_blackboard",
    "get_logger",
    "placement_message",
    "shot_message",
]
