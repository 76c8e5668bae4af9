# main.py
import argparse
import logging
from dataclasses import replace
from typing import List, Optional

import pygame # type: ignore

from .config import CFG, Config
from .game import (
    new_game_state, make_layout, handle_input, step_game,
    draw_game, draw_overlay, cancel_countdown_timer,
)

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Steer the snake with the mouse pointer.")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed for food placement")
    parser.add_argument("--speed", type=float, default=CFG.speed, help="head speed in pixels per frame")
    parser.add_argument("--spacing", type=int, default=CFG.spacing, help="frames between body segments")
    parser.add_argument("--fps", type=int, default=CFG.fps, help="frame rate cap")
    parser.add_argument(
        "--bound-path",
        action="store_true",
        help="keep only the part of the head history the body can still reach",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return replace(
        CFG,
        seed=args.seed,
        speed=args.speed,
        spacing=args.spacing,
        fps=args.fps,
        bound_path=args.bound_path,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = build_config(args)
    except ValueError as exc:
        raise SystemExit(f"cursor-snake: {exc}")

    pygame.init()
    fonts = {
        "text": pygame.font.SysFont(None, 32),
        "title": pygame.font.SysFont(None, 56),
        "big": pygame.font.SysFont(None, 120),
    }
    layout = make_layout(cfg)
    screen = pygame.display.set_mode((layout.width, layout.height))
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()

    state = new_game_state(cfg)
    logger.info("Window %dx%d, board %dpx", layout.width, layout.height, cfg.board_size)

    running = True
    while running:
        # 1) input
        running = handle_input(state, layout)
        if not running:
            break

        # 2) update (no-op unless playing)
        step_game(state)

        # 3) render
        draw_game(screen, fonts["text"], state, layout)
        draw_overlay(screen, fonts, state, layout)
        pygame.display.flip()
        clock.tick(cfg.fps)

    cancel_countdown_timer()
    pygame.quit()

if __name__ == "__main__":
    main()
