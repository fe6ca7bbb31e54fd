"""Piece model and the seven tetromino shapes"""
from dataclasses import dataclass
from typing import Dict, List

from tetris_geometry import Pos

PIECES = ["I", "O", "T", "J", "L", "S", "Z"]

# Block offsets from a shape-local origin; the second block is the pivot.
SHAPES: Dict[str, List[Pos]] = {
    "I": [(0,0), (1,0), (2,0), (3,0)],
    "O": [(0,0), (1,0), (0,1), (1,1)],
    "T": [(0,0), (1,0), (2,0), (1,1)],
    "J": [(0,1), (1,1), (2,1), (0,0)],
    "L": [(0,1), (1,1), (2,1), (2,0)],
    "S": [(0,1), (1,1), (1,0), (2,0)],
    "Z": [(0,0), (1,0), (1,1), (2,1)],
}

PIVOT_INDEX = 1


@dataclass
class Piece:
    t: str
    blocks: List[Pos]
    pivot: int = PIVOT_INDEX

    @staticmethod
    def from_shape(t: str) -> "Piece":
        """Unspawned piece sitting at its local offsets."""
        if t not in SHAPES:
            raise ValueError(f"unknown shape {t!r}")
        return Piece(t, list(SHAPES[t]))

    @property
    def pivot_pos(self) -> Pos:
        return self.blocks[self.pivot]

    @property
    def width(self) -> int:
        xs = [x for x, _ in self.blocks]
        return max(xs) - min(xs) + 1

    def copy(self) -> "Piece":
        return Piece(self.t, list(self.blocks), self.pivot)
