# config.py
from dataclasses import dataclass
import os
from typing import Optional, Tuple

# ----- Grid & window -----
GRID_SIZE = 25
CELL_SIZE = 20
CANVAS_SIZE = GRID_SIZE * CELL_SIZE
HUD_HEIGHT = 40
PANEL_HEIGHT = 150
WIDTH, HEIGHT = CANVAS_SIZE, HUD_HEIGHT + CANVAS_SIZE + PANEL_HEIGHT

# ----- Pacing (ms per tick) -----
INITIAL_SPEED = 150
SPEED_FLOOR = 60
SPEED_STEP = 4

# ----- Scoring & persistence -----
FOOD_SCORE = 10
HIGHSCORE_KEY = "snake-highscore"
FALLBACK_FOOD = (0, 0)

# ----- Colors -----
BG         = (3, 7, 18)
PANEL      = (15, 23, 42)
GRID_LINE  = (13, 17, 28)
FOOD       = (249, 115, 22)
HEAD       = (56, 189, 248)
BODY       = (14, 165, 233)
TEXT       = (226, 232, 240)
MUTED      = (100, 116, 139)
BUTTON     = (30, 41, 59)
BANNER     = (244, 63, 94)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

Cell = Tuple[int, int]
Direction = Tuple[int, int]

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    highscore_path: str = os.path.join(os.path.expanduser("~"), ".neon_snake.json")
    fps: int = 60

CFG = Config()
