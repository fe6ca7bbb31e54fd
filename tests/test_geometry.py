from tetris_geometry import offset, rotate_ccw, in_bounds


def test_offset():
    assert offset((3, 4), -1, 2) == (2, 6)


def test_rotate_about_pivot():
    assert rotate_ccw((2, 1), (1, 1)) == (1, 2)
    assert rotate_ccw((1, 1), (1, 1)) == (1, 1)
    assert rotate_ccw((0, 0), (0, 0)) == (0, 0)


def test_four_turns_is_identity():
    pos, pivot = (7, -3), (2, 5)
    p = pos
    for _ in range(4):
        p = rotate_ccw(p, pivot)
    assert p == pos


def test_in_bounds():
    assert in_bounds((0, 0), 10, 20)
    assert in_bounds((9, 19), 10, 20)
    assert not in_bounds((10, 0), 10, 20)
    assert not in_bounds((0, 20), 10, 20)
    assert not in_bounds((-1, 5), 10, 20)
