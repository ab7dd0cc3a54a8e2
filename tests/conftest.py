import os
import random

import pytest

# headless pygame for renderer tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from neon_snake.food import FoodSpawner
from neon_snake.scheduler import ManualScheduler
from neon_snake.state_machine import GameStateMachine
from neon_snake.storage import MemoryStore


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def machine(scheduler, store):
    return GameStateMachine(scheduler=scheduler, spawner=FoodSpawner(random.Random(7)), store=store)
