# tetris_layout.py
from dataclasses import dataclass
from typing import Dict, Tuple
from tetris_config import CONFIG, COLS, ROWS

BUTTONS = ("start", "stop", "restart")

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    panel_x: int
    panel_y: int
    timer_pos: Tuple[int, int]
    buttons: Dict[str, Tuple[int, int, int, int]]

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = int(CONFIG["PANEL_WIDTH_PX"])

    # Board sits at the origin: cell (col, row) -> (col*cell, row*cell)
    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = board_w + margin + panel_w + margin
    total_h = board_h

    panel_x = board_w + margin
    panel_y = margin

    btn_w, btn_h = panel_w - 24, 36
    buttons = {}
    y = panel_y + 96
    for name in BUTTONS:
        buttons[name] = (panel_x + 12, y, btn_w, btn_h)
        y += btn_h + 12

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        panel_x=panel_x, panel_y=panel_y,
        timer_pos=(panel_x + 12, panel_y + 44),
        buttons=buttons,
    )

def button_at(dims: Dims, pos: Tuple[int, int]):
    px, py = pos
    for name, (x, y, w, h) in dims.buttons.items():
        if x <= px < x + w and y <= py < y + h:
            return name
    return None
