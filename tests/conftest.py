from __future__ import annotations

import os
import random

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from blockdodge.config import GameConfig
from blockdodge.models import Direction, SpawnInfo
from blockdodge.spawn_pool import SpawnPositionPool


class FakeClock:
    """Wall-clock stand-in that only moves when a test advances it."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def config() -> GameConfig:
    return GameConfig(seed=1234)


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def far_pool() -> SpawnPositionPool:
    """Slots whose blocks never cross the centre where the player starts."""
    return SpawnPositionPool(
        vertical=[
            SpawnInfo((200.0, 450.0), Direction.DOWN),
            SpawnInfo((-200.0, -450.0), Direction.UP),
        ],
        horizontal=[
            SpawnInfo((-250.0, 400.0), Direction.RIGHT),
            SpawnInfo((250.0, -400.0), Direction.LEFT),
        ],
    )
