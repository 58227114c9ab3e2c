"""Blackboard implementation."""

from __future__ import annotations


class RuntimeBlackboard:
    """Dict-backed blackboard; keys are stripped and must be non-empty."""

    def __init__(self) -> None:
        self._values: dict[str, object] = {}

    def __len__(self) -> int:
        return len(self._values)

    def set(self, key: str, value: object) -> None:
        self._values[_normalize(key)] = value

    def has(self, key: str) -> bool:
        return _normalize(key) in self._values

    def remove(self, key: str) -> object | None:
        return self._values.pop(_normalize(key), None)

    def clear(self) -> None:
        self._values.clear()


def _normalize(key: str) -> str:
    normalized = key.strip()
    if not normalized:
        raise ValueError("blackboard key must not be empty")
    return normalized
