"""Board helpers: occupancy, collide, merge, sweep"""
from typing import List
from tetris_shapes import Shape

Board = List[List[int]]

FILLED = 1

def new_board(cols: int, rows: int) -> Board:
    if cols <= 0 or rows <= 0:
        raise ValueError(f"board needs positive dimensions, got {cols}x{rows}")
    return [[0] * cols for _ in range(rows)]

def is_occupied(board: Board, row: int, col: int) -> bool:
    """Walls and floor block; rows above the top never do."""
    if col < 0 or col >= len(board[0]) or row >= len(board):
        return True
    if row < 0:
        return False
    return board[row][col] != 0

def collide(board: Board, x: int, y: int, shape: Shape) -> bool:
    for r, row in enumerate(shape):
        for c, v in enumerate(row):
            if v and is_occupied(board, y + r, x + c):
                return True
    return False

def merge(board: Board, x: int, y: int, shape: Shape) -> None:
    """Write the shape into the board (no collision check)."""
    for r, row in enumerate(shape):
        for c, v in enumerate(row):
            if v and y + r >= 0:
                board[y + r][x + c] = FILLED

def sweep(board: Board) -> int:
    """Clear full lines bottom-up and return the number of cleared rows."""
    cols = len(board[0])
    cleared = 0
    y = len(board) - 1
    while y >= 0:
        if all(board[y]):
            del board[y]
            board.insert(0, [0] * cols)
            cleared += 1
        else:
            y -= 1
    return cleared
