"""
Pygame render sink for the engine.

- Pre-render one cell Surface per piece color and blit them.
- Pre-render the static background (grid + frame) once per window size.
- Cache the score text; re-render only when the score changes.
"""
from __future__ import annotations
import pygame
from typing import Dict, Tuple, List, Optional
from tetris_layout import Dims
from tetris_piece import Piece

# Colors per tetromino type
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}
FALLBACK = (180,180,180)


class PygameRenderer:
    """Draws board, falling piece, score and the game-over banner to ``screen``."""
    def __init__(self, screen: pygame.Surface, dims: Dims, cols: int, rows: int,
                 font: pygame.font.Font, big_font: pygame.font.Font):
        self.screen = screen
        self.dims = dims
        self.cols, self.rows = cols, rows
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self._score = -1
        self._score_s: Optional[pygame.Surface] = None
        self._banner = big_font.render("GAME OVER", True, (255,220,220))

    # ---------- Static background (grid + frame) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        frame = pygame.Rect(d.board_x-1, d.board_y-1, d.board_w+2, d.board_h+2)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s

    def _sprite(self, t: str) -> pygame.Surface:
        if t not in self.cell_surf:
            s = pygame.Surface((self.dims.cell-2, self.dims.cell-2))
            s.fill(FALLBACK)
            self.cell_surf[t] = s
        return self.cell_surf[t]

    def draw_cell(self, t: str, bx: int, by: int):
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + by*self.dims.cell + 1
        self.screen.blit(self._sprite(t), (rx, ry))

    def draw_score(self, score: int):
        if score != self._score:
            self._score = score
            self._score_s = self.font.render(f"Score: {score}", True, (200,210,240))
        d = self.dims
        self.screen.blit(self._score_s, (d.board_x + 4, d.board_y + d.board_h + d.margin // 2))

    # ---------- Sink ----------
    def render(self, board: List[List[Optional[str]]], piece: Optional[Piece], score: int, game_over: bool):
        self.screen.blit(self.bg, (0,0))
        for y, row in enumerate(board):
            for x, t in enumerate(row):
                if t:
                    self.draw_cell(t, x, y)
        if piece is not None:
            for x, y in piece.blocks:
                self.draw_cell(piece.t, x, y)
        self.draw_score(score)
        if game_over:
            d = self.dims
            rect = self._banner.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
            self.screen.blit(self._banner, rect)
        pygame.display.flip()
