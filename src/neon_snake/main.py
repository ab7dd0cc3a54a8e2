# main.py
from __future__ import annotations
import argparse
import logging
import random

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, Config, CFG
from .controls import handle_click, handle_key
from .food import FoodSpawner
from .render import BoardView, draw_frame
from .scheduler import PygameScheduler
from .state_machine import GameStateMachine
from .storage import JsonFileStore


def build_machine(cfg: Config, scheduler) -> GameStateMachine:
    spawner = FoodSpawner(random.Random(cfg.seed))
    store = JsonFileStore(cfg.highscore_path)
    return GameStateMachine(scheduler=scheduler, spawner=spawner, store=store)


def run(cfg: Config) -> int:
    """Open the window and play until it is closed. Returns the session high score."""
    pygame.init()
    font = pygame.font.SysFont(None, 22)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Neon Snake")
    clock = pygame.time.Clock()

    scheduler = PygameScheduler()
    machine = build_machine(cfg, scheduler)
    view = BoardView()
    machine.subscribe(view)
    print(f"[SNAKE] High score on record: {machine.high_score}")

    running = True
    try:
        while running:
            # 1) input + ticks, in arrival order
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif scheduler.dispatch(event):
                    continue
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        handle_key(machine, event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    handle_click(machine, event.pos)

            # 2) render
            draw_frame(screen, font, machine, view)
            pygame.display.flip()
            clock.tick(cfg.fps)
    finally:
        scheduler.cancel()
        pygame.quit()

    print(f"[SNAKE] Session over. score={machine.score}, high score={machine.high_score}")
    return machine.high_score


def main(argv=None):
    parser = argparse.ArgumentParser(prog="neon-snake", description="Neon Snake")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed food placement for a reproducible game")
    parser.add_argument("--highscore-file", type=str, default=CFG.highscore_path,
                        help="JSON file holding the high score")
    parser.add_argument("--fps", type=int, default=CFG.fps,
                        help="redraw rate; does not affect game speed")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(seed=args.seed, highscore_path=args.highscore_file, fps=args.fps)
    run(cfg)


if __name__ == "__main__":
    main()
