import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_game import Game, GameState
from tetris_input import KeyboardInput
from tetris_layout import compute_dims
from tetris_loop import TickLoop
from tetris_render import PygameRenderer
from tetris_rng import UniformRandom

logger = logging.getLogger("tetris")

GAME_OVER_HOLD_MS = 1500


def positive_int(text):
    v = int(text)
    if v <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return v


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Falling-block puzzle game")
    parser.add_argument("--width", type=positive_int, default=CONFIG["COLS"], help="board columns (default %(default)s)")
    parser.add_argument("--height", type=positive_int, default=CONFIG["ROWS"], help="board rows (default %(default)s)")
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"], help="seed for the piece randomizer")
    parser.add_argument("--fall-ms", type=positive_int, default=CONFIG["FALL_INTERVAL_MS"],
                        help="milliseconds between gravity steps (default %(default)s)")
    parser.add_argument("--fps", type=positive_int, default=CONFIG["TARGET_FPS"], help="frame rate (default %(default)s)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging level")
    args = parser.parse_args(argv)
    if args.width < 4 or args.height < 2:
        parser.error("board must be at least 4 columns by 2 rows")
    return args


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    pygame.init()
    try:
        dims = compute_dims(args.width, args.height)
        screen = recreate_window(dims)
        pygame.display.set_caption("Tetris")
        font = pygame.font.SysFont(None, 22)
        big_font = pygame.font.SysFont(None, 42)

        game = Game(args.width, args.height, rng=UniformRandom(args.seed), fall_interval_ms=args.fall_ms)
        renderer = PygameRenderer(screen, dims, args.width, args.height, font, big_font)
        clock = pygame.time.Clock()
        loop = TickLoop(game, KeyboardInput(), renderer, pace=lambda: clock.tick(args.fps))

        logger.info("starting %dx%d game, seed=%s", args.width, args.height, args.seed)
        if loop.run() is GameState.GAME_OVER:
            pygame.time.wait(GAME_OVER_HOLD_MS)
        logger.info("final score %d", game.score)
        return 0
    except (pygame.error, OSError):
        logger.exception("fatal display/input error")
        raise
    finally:
        pygame.quit()


if __name__ == '__main__':
    sys.exit(main())
