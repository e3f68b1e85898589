from __future__ import annotations
import os
import random

# Headless pygame for every test module
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from tapsnake.game import GameState, PlayableRegion
from tapsnake.store import MemoryStore


@pytest.fixture
def region() -> PlayableRegion:
    # 1..10 x 3..12
    return PlayableRegion(min_x=1, max_x=10, min_y=3, max_y=12)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def state(region: PlayableRegion, store: MemoryStore) -> GameState:
    return GameState(region, store=store, start=(5, 5), rng=random.Random(0))
