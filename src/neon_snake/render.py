# render.py
from __future__ import annotations
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, CANVAS_SIZE, GRID_SIZE, HUD_HEIGHT,
    BG, PANEL, GRID_LINE, FOOD, HEAD, BODY, TEXT, MUTED, BUTTON, BANNER,
    Cell,
)
from .controls import PANEL_TOP, visible_buttons
from .state_machine import RunState, Snapshot

# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, cell: Cell, color: Tuple[int, int, int],
              inset: int = 0, top: int = HUD_HEIGHT) -> None:
    gx, gy = cell
    rect = pygame.Rect(
        gx * CELL_SIZE + inset,
        top + gy * CELL_SIZE + inset,
        CELL_SIZE - 2 * inset,
        CELL_SIZE - 2 * inset,
    )
    pygame.draw.rect(screen, color, rect)


def draw_grid(screen: pygame.Surface, top: int = HUD_HEIGHT) -> None:
    for i in range(GRID_SIZE + 1):
        offset = i * CELL_SIZE
        pygame.draw.line(screen, GRID_LINE, (offset, top), (offset, top + CANVAS_SIZE))
        pygame.draw.line(screen, GRID_LINE, (0, top + offset), (CANVAS_SIZE, top + offset))


def draw_board(screen: pygame.Surface, snapshot: Snapshot, top: int = HUD_HEIGHT) -> None:
    """Board background, food, then the snake with its head in its own color."""
    pygame.draw.rect(screen, BG, pygame.Rect(0, top, CANVAS_SIZE, CANVAS_SIZE))
    draw_grid(screen, top)
    draw_cell(screen, snapshot.food_cell, FOOD, inset=2, top=top)
    for index, cell in enumerate(snapshot.snake_cells):
        draw_cell(screen, cell, HEAD if index == 0 else BODY, inset=1, top=top)


# ---------- Board view ----------
class BoardView:
    """Keeps the last snapshot the game published; redraws only when it changed."""

    def __init__(self) -> None:
        self.snapshot: Optional[Snapshot] = None
        self.dirty = True

    def __call__(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot
        self.dirty = True


# ---------- HUD / panel ----------
def draw_hud(screen: pygame.Surface, font: pygame.font.Font, machine) -> None:
    pygame.draw.rect(screen, PANEL, pygame.Rect(0, 0, WIDTH, HUD_HEIGHT))
    parts = [
        f"Score: {machine.score}",
        f"High Score: {machine.high_score}",
        f"Speed: {machine.state.speed.tiles_per_second:.1f} tiles/sec",
    ]
    x = 10
    for part in parts:
        txt = font.render(part, True, TEXT)
        screen.blit(txt, txt.get_rect(midleft=(x, HUD_HEIGHT // 2)))
        x += txt.get_width() + 24


def status_message(machine) -> Optional[str]:
    if machine.run_state is RunState.GAME_OVER:
        return "Game over! Press restart or hit space to play again."
    if machine.run_state is RunState.PAUSED:
        return "Paused - press space to resume."
    if machine.run_state is RunState.IDLE:
        return "Arrow keys or WASD to move, space to pause."
    return None


def draw_panel(screen: pygame.Surface, font: pygame.font.Font, machine) -> None:
    pygame.draw.rect(screen, PANEL, pygame.Rect(0, PANEL_TOP, WIDTH, HEIGHT - PANEL_TOP))
    for button in visible_buttons(machine):
        pygame.draw.rect(screen, BUTTON, button.rect, border_radius=8)
        label = font.render(button.label, True, TEXT if button.enabled else MUTED)
        screen.blit(label, label.get_rect(center=button.rect.center))

    message = status_message(machine)
    if message:
        color = BANNER if machine.run_state is RunState.GAME_OVER else MUTED
        # wrap to the space left of the arrow pad
        words, lines, line = message.split(), [], ""
        for word in words:
            trial = f"{line} {word}".strip()
            if font.size(trial)[0] > 300 and line:
                lines.append(line)
                line = word
            else:
                line = trial
        lines.append(line)
        for i, text in enumerate(lines):
            txt = font.render(text, True, color)
            screen.blit(txt, (16, PANEL_TOP + 70 + i * (font.get_linesize() + 2)))


def draw_frame(screen: pygame.Surface, font: pygame.font.Font, machine, view: BoardView) -> None:
    screen.fill(BG)
    draw_hud(screen, font, machine)
    if view.snapshot is not None:
        draw_board(screen, view.snapshot)
    draw_panel(screen, font, machine)
    view.dirty = False
