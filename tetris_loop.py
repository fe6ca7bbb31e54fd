"""Fixed-rate driver: poll, tick, render, pace"""
import logging
from typing import Callable, Optional

from tetris_game import Game, GameState

logger = logging.getLogger(__name__)


class TickLoop:
    """Runs ``game`` until quit or game over.

    ``input_source.poll()`` must not block; ``pace()`` is called once per frame
    to hold the target rate (pygame's ``Clock.tick`` when run from main).
    Exceptions from the input source or render sink are not caught.
    """

    def __init__(self, game: Game, input_source, render_sink,
                 pace: Optional[Callable[[], object]] = None):
        self.game = game
        self.input = input_source
        self.render = render_sink
        self.pace = pace or (lambda: None)
        self.frames = 0

    def step(self) -> bool:
        g = self.game
        # spawn ticks take no input, so leave pending keys for the next tick
        command = self.input.poll() if g.current is not None else None
        running = g.tick(command)
        current = g.current.copy() if g.current is not None else None
        self.render.render(g.board.snapshot(), current, g.score, g.game_over)
        self.frames += 1
        return running

    def run(self) -> GameState:
        while self.step():
            self.pace()
        logger.info("loop stopped after %d frames: %s, score %d",
                    self.frames, self.game.state.value, self.game.score)
        return self.game.state
