"""Keyboard input source: pygame events -> one Command per poll"""
from collections import deque
from typing import Callable, Deque, Iterable, Optional

import pygame

from tetris_game import Command

KEYMAP = {
    pygame.K_LEFT: Command.LEFT,  pygame.K_a: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT, pygame.K_d: Command.RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP, pygame.K_s: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE_CCW, pygame.K_w: Command.ROTATE_CCW, pygame.K_z: Command.ROTATE_CCW,
    pygame.K_q: Command.QUIT, pygame.K_ESCAPE: Command.QUIT,
}


def command_for(event) -> Optional[Command]:
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return KEYMAP.get(event.key)
    return None


class KeyboardInput:
    """Non-blocking: drains whatever events are waiting and queues the ones that map
    to a command. Each poll hands out at most one, oldest first."""

    def __init__(self, events: Callable[[], Iterable] = pygame.event.get):
        self.events = events
        self.pending: Deque[Command] = deque()

    def poll(self) -> Optional[Command]:
        for e in self.events():
            cmd = command_for(e)
            if cmd is not None:
                self.pending.append(cmd)
        return self.pending.popleft() if self.pending else None
