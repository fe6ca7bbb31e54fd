"""Uniform random shape selector"""
import random
from typing import Optional

from tetris_piece import PIECES


class UniformRandom:
    """Independent draws over the seven shapes, 1/7 each.

    No bag or repeat rejection: droughts and long runs of one shape are
    possible. Pass ``seed`` to replay a game.
    """

    PIECES = PIECES

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rand = random.Random(seed)

    def uniform_shape(self) -> str:
        return self._rand.choice(self.PIECES)
