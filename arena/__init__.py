"""Contest arena contracts and runtime helpers shared by players."""

from arena.api.messages import Direction, Message, MessageType
from arena.api.player import Player

__all__ = ["Direction", "Message", "MessageType", "Player"]
