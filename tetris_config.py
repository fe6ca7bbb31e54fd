
CONFIG = {
    "COLS": 10,
    "ROWS": 20,
    "CELL_SIZE": 32,
    "FALL_INTERVAL_MS": 600,
    "TARGET_FPS": 60,
    "SEED": None,
}
