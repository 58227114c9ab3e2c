from __future__ import annotations

import pytest

from arena.ai.blackboard import RuntimeBlackboard
from arena.api.ai import create_blackboard


def test_blackboard_set_has_remove() -> None:
    blackboard = create_blackboard()
    blackboard.set("target", (3, 4))
    assert blackboard.has("target")
    assert blackboard.remove("target") == (3, 4)
    assert not blackboard.has("target")
    assert blackboard.remove("target") is None


def test_blackboard_keys_are_stripped() -> None:
    blackboard = create_blackboard()
    blackboard.set("  shot ", 1)
    assert blackboard.has("shot")
    assert blackboard.remove(" shot") == 1


@pytest.mark.parametrize("key", ["", "   "])
def test_blackboard_rejects_empty_keys(key: str) -> None:
    blackboard = create_blackboard()
    with pytest.raises(ValueError):
        blackboard.set(key, 1)
    with pytest.raises(ValueError):
        blackboard.has(key)


def test_blackboard_clear_drops_all_values() -> None:
    blackboard = RuntimeBlackboard()
    blackboard.set("a", 1)
    blackboard.set("b", 2)
    blackboard.clear()
    assert len(blackboard) == 0
