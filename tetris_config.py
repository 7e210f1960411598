import os

CONFIG = {
    "CELL_SIZE": 30,
    "BOARD_WIDTH_PX": 300,
    "BOARD_HEIGHT_PX": 600,
    "PANEL_WIDTH_PX": 180,
    "GRAVITY_INTERVAL_MS": 500,
    "TIMER_REFRESH_MS": 1000,
    "TARGET_FPS": 60,
    "LOG_LEVEL": os.environ.get("TETRIS_LOG_LEVEL", "INFO"),
}

COLS = CONFIG["BOARD_WIDTH_PX"] // CONFIG["CELL_SIZE"]
ROWS = CONFIG["BOARD_HEIGHT_PX"] // CONFIG["CELL_SIZE"]
