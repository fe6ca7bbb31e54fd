import itertools

import pytest

from tetris_game import Game


class FakeClock:
    def __init__(self, t=0.0):
        self.t = t

    def __call__(self):
        return self.t

    def advance(self, seconds):
        self.t += seconds


class ScriptedRandom:
    """Hands out shapes in order, cycling."""
    def __init__(self, shapes):
        self._it = itertools.cycle(shapes)

    def uniform_shape(self):
        return next(self._it)


class ScriptedInput:
    def __init__(self, commands=()):
        self.commands = list(commands)
        self.polls = 0

    def poll(self):
        self.polls += 1
        return self.commands.pop(0) if self.commands else None


class RecordingSink:
    def __init__(self):
        self.frames = []

    def render(self, board, piece, score, game_over):
        self.frames.append((board, piece, score, game_over))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_game(clock):
    def make(shapes=("I",), width=10, height=20, fall_interval_ms=1000):
        return Game(width, height, rng=ScriptedRandom(shapes), clock=clock,
                    fall_interval_ms=fall_interval_ms)
    return make
