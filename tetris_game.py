"""
Game engine: spawn, gravity, input dispatch, landing, line clears and game over.

One call to Game.tick() is one frame of play. The engine never touches the
screen or the keyboard; the tick loop feeds it an optional Command and hands
the resulting state to a render sink.
"""
from __future__ import annotations
import enum
import logging
import time
from typing import Callable, Optional

import tetris_moves as moves
from tetris_board import Board
from tetris_config import CONFIG
from tetris_piece import Piece
from tetris_rng import UniformRandom

logger = logging.getLogger(__name__)

LINE_SCORE = 100        # per fully occupied row
SOFT_DROP_SCORE = 1     # per soft-drop command, moved or not


class GameState(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Command(enum.Enum):
    QUIT = "quit"
    LEFT = "left"
    RIGHT = "right"
    SOFT_DROP = "soft_drop"
    ROTATE_CCW = "rotate_ccw"


class Game:
    def __init__(self, width: int = CONFIG["COLS"], height: int = CONFIG["ROWS"], *,
                 rng=None, clock: Callable[[], float] = time.monotonic,
                 fall_interval_ms: float = CONFIG["FALL_INTERVAL_MS"]):
        if rng is None:
            rng = UniformRandom(CONFIG["SEED"])
        if fall_interval_ms <= 0:
            raise ValueError(f"fall interval must be positive, got {fall_interval_ms}")
        self.width = width
        self.height = height
        self.board = Board(width, height)
        self.current: Optional[Piece] = None
        self.score = 0
        self.lines_cleared = 0
        self.state = GameState.PLAYING
        self.rng = rng
        self.clock = clock
        self.fall_interval = fall_interval_ms / 1000.0
        self.last_fall = clock()

    @property
    def center(self) -> int:
        return self.width // 2

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    # ---------- steps ----------
    def spawn(self) -> bool:
        """Place a fresh random piece at the top, centered. Ends the game if it doesn't fit."""
        piece = Piece.from_shape(self.rng.uniform_shape())
        if not moves.translate(piece, self.board, (self.width - piece.width) // 2, 0):
            logger.info("spawn of %s blocked, game over with score %d", piece.t, self.score)
            self.state = GameState.GAME_OVER
            return False
        logger.debug("spawned %s at %s", piece.t, piece.blocks)
        self.current = piece
        self.last_fall = self.clock()
        return True

    def apply_gravity(self):
        now = self.clock()
        if now - self.last_fall >= self.fall_interval:
            moves.down(self.current, self.board)
            self.last_fall = now

    def handle(self, command: Optional[Command]) -> bool:
        """Apply one input command to the falling piece. Returns False on quit."""
        p, b = self.current, self.board
        if command is Command.QUIT:
            logger.info("quit with score %d", self.score)
            return False
        if command is Command.LEFT:
            moves.left(p, b)
        elif command is Command.RIGHT:
            moves.right(p, b)
        elif command is Command.SOFT_DROP:
            moves.down(p, b)
            self.score += SOFT_DROP_SCORE
        elif command is Command.ROTATE_CCW:
            moves.rotate_counter_clockwise(p, b)
        return True

    def land(self) -> bool:
        """Lock the falling piece into the board if it can't fall further."""
        if self.current is None or not moves.is_done_falling(self.current, self.board):
            return False
        logger.debug("locked %s at %s", self.current.t, self.current.blocks)
        self.board.lock(self.current)
        self.current = None
        return True

    def clear_lines(self) -> int:
        """One bottom-to-top compaction pass; returns rows cleared.

        Full rows score and collapse. Empty rows collapse too, pulling the row
        above down by one, so floating rows settle over the following passes.
        """
        b = self.board
        cleared = 0
        for y in range(b.height - 1, -1, -1):
            full = b.row_fully_occupied(y)
            if full:
                cleared += 1
                self.score += LINE_SCORE
            if full or b.row_empty(y):
                if y == 0:
                    b.clear_row(0)
                else:
                    b.shift_row_down(y)
        if cleared:
            self.lines_cleared += cleared
            logger.info("cleared %d line(s), score %d", cleared, self.score)
        return cleared

    def check_top(self):
        col = self.center - 1
        if self.board.is_occupied(col, 0) or self.board.is_occupied(col, 1):
            logger.info("stack reached the top, game over with score %d", self.score)
            self.state = GameState.GAME_OVER

    # ---------- frame ----------
    def tick(self, command: Optional[Command] = None) -> bool:
        """Advance one frame. Returns False once the loop should stop."""
        if self.game_over:
            return False
        if command is Command.QUIT:
            return self.handle(command)
        if self.current is None:
            if not self.spawn():
                return False
        else:
            self.apply_gravity()
            if not self.handle(command):
                return False
        self.land()
        self.clear_lines()
        self.check_top()
        return not self.game_over
