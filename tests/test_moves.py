import random

import pytest

import tetris_moves as moves
from tetris_board import Board
from tetris_piece import PIECES, Piece


def spawned(t, board, dx=None, dy=0):
    p = Piece.from_shape(t)
    if dx is None:
        dx = (board.width - p.width) // 2
    assert moves.translate(p, board, dx, dy)
    return p


def test_spawned_i_is_centered():
    b = Board(10, 20)
    p = spawned("I", b)
    assert p.blocks == [(3, 0), (4, 0), (5, 0), (6, 0)]


def test_i_piece_falls_to_floor():
    b = Board(10, 20)
    p = spawned("I", b)
    for _ in range(19):
        assert moves.down(p, b)
    assert {y for _, y in p.blocks} == {19}
    before = list(p.blocks)
    assert not moves.down(p, b)
    assert p.blocks == before


def test_walls_stop_sideways_moves():
    b = Board(10, 20)
    p = spawned("O", b, dx=0)
    assert not moves.left(p, b)
    assert p.blocks == [(0, 0), (1, 0), (0, 1), (1, 1)]
    for _ in range(8):
        assert moves.right(p, b)
    assert not moves.right(p, b)
    assert max(x for x, _ in p.blocks) == 9


def test_blocked_move_leaves_piece_untouched():
    b = Board(10, 20)
    p = spawned("I", b)
    b.set(6, 1, "Z")          # under only one of the four blocks
    before = list(p.blocks)
    assert not moves.down(p, b)
    assert p.blocks == before


def test_rotation_about_pivot():
    b = Board(10, 20)
    p = spawned("T", b, dx=3, dy=5)
    assert p.blocks == [(3, 5), (4, 5), (5, 5), (4, 6)]
    assert moves.rotate_counter_clockwise(p, b)
    assert p.blocks == [(4, 4), (4, 5), (4, 6), (3, 5)]


def test_rotation_rejected_out_of_bounds():
    b = Board(10, 20)
    p = spawned("I", b)
    before = list(p.blocks)
    assert not moves.rotate_counter_clockwise(p, b)
    assert p.blocks == before


def test_rotation_rejected_on_occupied_cell():
    b = Board(10, 20)
    p = spawned("T", b, dx=3, dy=5)
    b.set(4, 4, "J")
    before = list(p.blocks)
    assert not moves.rotate_counter_clockwise(p, b)
    assert p.blocks == before


@pytest.mark.parametrize("t", PIECES)
def test_four_rotations_return_to_start(t):
    b = Board(10, 20)
    p = spawned(t, b, dx=4, dy=8)
    start = list(p.blocks)
    for _ in range(4):
        assert moves.rotate_counter_clockwise(p, b)
    assert p.blocks == start


@pytest.mark.parametrize("t", PIECES)
def test_accepted_moves_stay_in_bounds_and_off_locked_cells(t):
    rnd = random.Random(PIECES.index(t))
    b = Board(10, 20)
    for _ in range(30):
        x, y = rnd.randrange(10), rnd.randrange(6, 20)
        b.set(x, y, "Z")
    p = spawned(t, b)
    ops = [moves.left, moves.right, moves.down, moves.rotate_counter_clockwise]
    for _ in range(300):
        before = list(p.blocks)
        if rnd.choice(ops)(p, b):
            for x, y in p.blocks:
                assert 0 <= x < 10 and 0 <= y < 20
                assert b.is_empty(x, y)
        else:
            assert p.blocks == before


def test_landing_on_floor():
    b = Board(10, 20)
    p = spawned("I", b, dy=19)
    assert moves.is_done_falling(p, b)


def test_landing_on_stack():
    b = Board(10, 20)
    p = spawned("I", b, dy=5)
    assert not moves.is_done_falling(p, b)
    b.set(4, 6, "O")
    assert moves.is_done_falling(p, b)


def test_not_landed_with_clear_path():
    b = Board(10, 20)
    b.set(0, 19, "O")
    p = spawned("S", b, dy=10)
    assert not moves.is_done_falling(p, b)
