# main.py
from __future__ import annotations
import argparse
from typing import List, Optional

import numpy as np  # type: ignore
import pygame  # type: ignore

from .canvas import PygameCanvas, TerminalCanvas
from .config import CFG, Config
from .food import Food
from .level import Level, draw_food


def spawn_foods(level: Level, count: int) -> List[Food]:
    """
    Fill level.food_vec with up to `count` foods (never more than max_food),
    re-drawing any position that is already taken.
    """
    # Cannot exceed max_food or the number of free interior cells
    count = min(count, level.max_food - len(level.food_vec),
                level.width * level.height - len(level.food_vec))
    taken = {f.pos for f in level.food_vec}
    while count > 0:
        food = level.rng_food()
        if food.pos in taken:
            continue
        taken.add(food.pos)
        level.food_vec.append(food)
        count -= 1
    return level.food_vec


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(description="Paint a snake level and spawn food.")
    parser.add_argument("--width", type=int, default=CFG.width)
    parser.add_argument("--height", type=int, default=CFG.height)
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for reproducible food spawns")
    parser.add_argument("--foods", type=int, default=CFG.foods,
                        help="number of foods to spawn (capped at the level's max_food)")
    parser.add_argument("--backend", type=str, default="terminal",
                        choices=["terminal", "pygame"])
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    cfg = Config(
        seed=args.seed,
        width=max(args.width, 0),
        height=max(args.height, 0),
        foods=max(args.foods, 0),
        frame_delay_ms=CFG.frame_delay_ms,
        backend=args.backend,
        debug=args.debug,
    )
    return cfg


def run_pygame(level: Level, cfg: Config) -> None:
    canvas = PygameCanvas(level.total_width(), level.total_height())
    clock = pygame.time.Clock()
    level.generate(canvas)
    canvas.submit(draw_food(level, spawn_foods(level, cfg.foods)))

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_q, pygame.K_ESCAPE):
                running = False
        clock.tick(1000 // max(cfg.frame_delay_ms, 1))

    canvas.close()


def run_terminal(level: Level, cfg: Config) -> None:
    canvas = TerminalCanvas()
    level.generate(canvas)
    canvas.submit(draw_food(level, spawn_foods(level, cfg.foods)))
    canvas.close(level.total_height())

    for food in level.food_vec:
        print(f"{food.kind.name:6s} meals={food.meals:+d} at ({food.pos.x}, {food.pos.y})")


def main(argv: Optional[List[str]] = None):
    cfg = parse_args(argv)
    level = Level(cfg.width, cfg.height, rng=np.random.default_rng(cfg.seed), debug=cfg.debug)

    if cfg.backend == "pygame":
        run_pygame(level, cfg)
    else:
        run_terminal(level, cfg)

if __name__ == "__main__":
    main()
