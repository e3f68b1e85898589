# main.py
import argparse
import random
from typing import Tuple

import pygame  # type: ignore

from .clock import TICK_EVENT, PygameClock
from .config import CFG, Config, HEIGHT, WIDTH
from .controls import direction_from_key
from .game import GameState, PlayableRegion
from .render import draw_game, draw_overlay
from .session import Session
from .store import JsonFileStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Single-screen Snake. Tap or click to steer.")
    parser.add_argument("--width", type=int, default=WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT, help="window height in pixels")
    parser.add_argument("--cell-size", type=int, default=CFG.cell_size)
    parser.add_argument("--tick-ms", type=int, default=CFG.tick_ms, help="milliseconds per move")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed food placement")
    parser.add_argument(
        "--scores-file",
        type=str,
        default=CFG.scores_file,
        help="JSON file holding the best score",
    )
    parser.add_argument("--debug", action="store_true", help="print game events")
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def build_game(argv=None) -> Tuple[argparse.Namespace, Config, GameState]:
    """Parse flags and set up the game state. Bad sizes exit with a usage error."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        cfg = Config(
            seed=args.seed,
            tick_ms=args.tick_ms,
            cell_size=args.cell_size,
            scores_file=args.scores_file,
        )
        region = PlayableRegion.from_viewport(args.width, args.height, cfg.cell_size)
        store = JsonFileStore(cfg.scores_file, debug=args.debug)
        state = GameState(region, store=store, start=cfg.start_cell, rng=random.Random(cfg.seed))
    except ValueError as exc:
        parser.error(str(exc))
    return args, cfg, state


def main(argv=None) -> None:
    args, cfg, state = build_game(argv)
    region = state.region

    pygame.init()
    font = pygame.font.SysFont(None, 36)
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    session = Session(state, PygameClock(cfg.tick_ms), cfg.cell_size, debug=args.debug)
    if args.debug:
        print(f"[GAME] Region {region.width}x{region.height}, best={state.high_score}")

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == TICK_EVENT:
                session.on_tick()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                session.on_tap(*event.pos)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_SPACE, pygame.K_r):
                    if not session.running:
                        session.start()
                else:
                    direction = direction_from_key(event.key)
                    if direction is not None:
                        session.on_direction(direction)

        snap = state.snapshot()
        draw_game(screen, font, snap, cfg.cell_size)
        draw_overlay(screen, font, snap)
        pygame.display.flip()
        clock.tick(60)

    session.clock.stop()
    pygame.quit()


if __name__ == "__main__":
    main()
