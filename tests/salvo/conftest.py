from __future__ import annotations

import random

import pytest

from salvo.ai.sweep_player import SweepPlayer


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def player_factory():
    def _make(board_size: int = 10, seed: int = 1337, **kwargs) -> SweepPlayer:
        return SweepPlayer(board_size, random.Random(seed), **kwargs)

    return _make
