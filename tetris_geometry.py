"""Offset arithmetic and the quarter-turn rotation used by the move engine"""
from typing import Tuple

Pos = Tuple[int, int]


def offset(pos: Pos, dx: int, dy: int) -> Pos:
    return pos[0] + dx, pos[1] + dy


def rotate_ccw(pos: Pos, pivot: Pos) -> Pos:
    """Quarter turn of ``pos`` around ``pivot``: (x, y) -> (-y, x) relative to the pivot."""
    x, y = pos
    cx, cy = pivot
    return cx - (y - cy), cy + (x - cx)


def in_bounds(pos: Pos, width: int, height: int) -> bool:
    x, y = pos
    return 0 <= x < width and 0 <= y < height
