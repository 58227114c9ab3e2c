"""Arena runtime modules."""

from arena.runtime.debug_config import DebugConfig, load_debug_config
from arena.runtime.logging import configure_arena_logging, setup_arena_logging

__all__ = [
    "DebugConfig",
    "configure_arena_logging",
    "load_debug_config",
    "setup_arena_logging",
]
