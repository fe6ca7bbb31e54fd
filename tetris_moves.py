"""Move engine: all-or-nothing translate/rotate against a board"""
from typing import List

from tetris_board import Board
from tetris_geometry import Pos, offset, rotate_ccw, in_bounds
from tetris_piece import Piece


def fits(board: Board, cells: List[Pos]) -> bool:
    """True if every cell is on the board and empty."""
    for pos in cells:
        if not in_bounds(pos, board.width, board.height):
            return False
        if not board.is_empty(*pos):
            return False
    return True


def _commit(board: Board, piece: Piece, cells: List[Pos]) -> bool:
    if not fits(board, cells):
        return False
    piece.blocks = cells
    return True


def translate(piece: Piece, board: Board, dx: int, dy: int) -> bool:
    return _commit(board, piece, [offset(p, dx, dy) for p in piece.blocks])


def left(piece: Piece, board: Board) -> bool:
    return translate(piece, board, -1, 0)


def right(piece: Piece, board: Board) -> bool:
    return translate(piece, board, 1, 0)


def down(piece: Piece, board: Board) -> bool:
    return translate(piece, board, 0, 1)


def rotate_counter_clockwise(piece: Piece, board: Board) -> bool:
    """Quarter turn about the pivot block. No kicks: a blocked turn is simply refused."""
    pivot = piece.pivot_pos
    return _commit(board, piece, [rotate_ccw(p, pivot) for p in piece.blocks])


def is_done_falling(piece: Piece, board: Board) -> bool:
    for x, y in piece.blocks:
        if y == board.height - 1 or board.is_occupied(x, y + 1):
            return True
    return False
