# controls.py
from __future__ import annotations
from typing import List, NamedTuple, Optional, Tuple

import pygame  # type: ignore

from .config import (
    WIDTH, HUD_HEIGHT, CANVAS_SIZE,
    UP, DOWN, LEFT, RIGHT,
    Direction,
)
from .state_machine import RunState

# ---------- Keyboard ----------
def direction_for_key(key: int) -> Optional[Direction]:
    """
    Arrow keys and w/a/s/d. pygame reports letter keys by their lowercase code
    whatever the shift/caps state, so W and w map alike.
    """
    if key in (pygame.K_UP, pygame.K_w):
        return UP
    elif key in (pygame.K_DOWN, pygame.K_s):
        return DOWN
    elif key in (pygame.K_LEFT, pygame.K_a):
        return LEFT
    elif key in (pygame.K_RIGHT, pygame.K_d):
        return RIGHT
    return None


def handle_key(machine, key: int) -> bool:
    """Forward one key press to the game. Returns False for keys we don't use."""
    if key == pygame.K_SPACE:
        machine.toggle()
        return True
    direction = direction_for_key(key)
    if direction is None:
        return False
    machine.steer(direction)
    return True


# ---------- On-screen buttons ----------
class Button(NamedTuple):
    label: str
    rect: pygame.Rect
    action: str                    # "start" | "pause" | "resume" | "restart" | "steer"
    direction: Optional[Direction] = None
    enabled: bool = True


PANEL_TOP = HUD_HEIGHT + CANVAS_SIZE
ACTION_SIZE = (110, 36)
PAD_SIZE, PAD_GAP = 40, 4

_PRIMARY_RECT = pygame.Rect((16, PANEL_TOP + 16), ACTION_SIZE)
_RESTART_RECT = pygame.Rect((16 + ACTION_SIZE[0] + 10, PANEL_TOP + 16), ACTION_SIZE)


def _pad_rect(col: int, row: int) -> pygame.Rect:
    step = PAD_SIZE + PAD_GAP
    left = WIDTH - 16 - 3 * PAD_SIZE - 2 * PAD_GAP
    return pygame.Rect(left + col * step, PANEL_TOP + 10 + row * step, PAD_SIZE, PAD_SIZE)


ARROW_PAD: Tuple[Button, ...] = (
    Button("^", _pad_rect(1, 0), "steer", UP),
    Button("<", _pad_rect(0, 1), "steer", LEFT),
    Button(">", _pad_rect(2, 1), "steer", RIGHT),
    Button("v", _pad_rect(1, 2), "steer", DOWN),
)


def visible_buttons(machine) -> List[Button]:
    """Buttons to show for the current run state, arrow pad included."""
    buttons: List[Button] = []
    if machine.show_start:
        buttons.append(Button("Start", _PRIMARY_RECT, "start"))
    elif machine.run_state is RunState.RUNNING:
        buttons.append(Button("Pause", _PRIMARY_RECT, "pause"))
    elif machine.show_resume:
        buttons.append(Button("Resume", _PRIMARY_RECT, "resume"))
    buttons.append(Button("Restart", _RESTART_RECT, "restart", enabled=machine.can_restart))
    buttons.extend(ARROW_PAD)
    return buttons


def handle_click(machine, pos: Tuple[int, int]) -> bool:
    """Press whichever enabled button is under `pos`. Returns True if one was hit."""
    for button in visible_buttons(machine):
        if not button.enabled or not button.rect.collidepoint(pos):
            continue
        if button.action == "steer":
            machine.steer(button.direction)
        elif button.action == "start":
            machine.start()
        elif button.action == "pause":
            machine.pause()
        elif button.action == "resume":
            machine.resume()
        elif button.action == "restart":
            machine.restart()
        return True
    return False
