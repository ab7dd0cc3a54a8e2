"""Neon Snake: a tick-driven snake game on a fixed 25x25 grid."""

from .collision import Collision
from .food import FoodSpawner
from .game import GameState, TickResult, new_game_state, step_game
from .input_queue import InputQueue
from .scheduler import ManualScheduler, PygameScheduler
from .state_machine import GameStateMachine, RunState, Snapshot
from .storage import JsonFileStore, MemoryStore

__all__ = [
    "Collision",
    "FoodSpawner",
    "GameState",
    "TickResult",
    "new_game_state",
    "step_game",
    "InputQueue",
    "ManualScheduler",
    "PygameScheduler",
    "GameStateMachine",
    "RunState",
    "Snapshot",
    "JsonFileStore",
    "MemoryStore",
]

__version__ = "0.1.0"
