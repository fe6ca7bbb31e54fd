# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG


@dataclass
class Dims:
    cell: int
    margin: int
    hud_h: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int


def compute_dims(cols: int = CONFIG["COLS"], rows: int = CONFIG["ROWS"]) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    hud_h = 28

    board_w = cols * cell
    board_h = rows * cell

    total_w = margin + board_w + margin
    total_h = margin + board_h + margin + hud_h

    return Dims(
        cell=cell, margin=margin, hud_h=hud_h,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=margin, board_y=margin,
    )
