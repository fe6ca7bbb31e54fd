"""Board grid: occupancy queries, locking and row compaction"""
from typing import List, Optional

from tetris_piece import Piece

Cell = Optional[str]


class Board:
    """Fixed ``width`` x ``height`` grid; a cell is None or the tag of the piece locked there."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"board size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.rows: List[List[Cell]] = [[None] * width for _ in range(height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int):
        if not self.in_bounds(x, y):
            raise ValueError(f"cell ({x}, {y}) outside {self.width}x{self.height} board")

    def is_empty(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.rows[y][x] is None

    def is_occupied(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.rows[y][x] is not None

    def get(self, x: int, y: int) -> Cell:
        self._check(x, y)
        return self.rows[y][x]

    def set(self, x: int, y: int, tag: str):
        self._check(x, y)
        self.rows[y][x] = tag

    def clear(self, x: int, y: int):
        self._check(x, y)
        self.rows[y][x] = None

    def row_fully_occupied(self, y: int) -> bool:
        return all(c is not None for c in self.rows[y])

    def row_empty(self, y: int) -> bool:
        return all(c is None for c in self.rows[y])

    def clear_row(self, y: int):
        self.rows[y] = [None] * self.width

    def shift_row_down(self, y: int):
        """Copy row y-1 into row y, then empty row y-1."""
        if not 0 < y < self.height:
            raise ValueError(f"cannot shift row {y} down")
        self.rows[y] = self.rows[y - 1][:]
        self.clear_row(y - 1)

    def lock(self, piece: Piece):
        for x, y in piece.blocks:
            self.set(x, y, piece.t)

    def snapshot(self) -> List[List[Cell]]:
        return [r[:] for r in self.rows]
