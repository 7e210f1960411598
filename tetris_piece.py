"""Active piece: shape + offset, validated moves and rotation"""
from dataclasses import dataclass

from tetris_board import Board, collide
from tetris_shapes import Shape, rotate_cw

@dataclass
class Piece:
    shape: Shape
    x: int
    y: int

    @staticmethod
    def spawn(shape: Shape, cols: int) -> "Piece":
        return Piece(shape, cols // 2 - 1, 0)

    def cells(self):
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r

def try_move(board: Board, piece: Piece, dx: int, dy: int) -> bool:
    if collide(board, piece.x + dx, piece.y + dy, piece.shape):
        return False
    piece.x += dx
    piece.y += dy
    return True

# No wall kicks: a rotation that overlaps anything is rejected outright.
def try_rotate(board: Board, piece: Piece) -> bool:
    rotated = rotate_cw(piece.shape)
    if collide(board, piece.x, piece.y, rotated):
        return False
    piece.shape = rotated
    return True
