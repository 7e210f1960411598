"""Shape catalog, random pick and rotation"""
import random
from typing import Optional, Tuple

Shape = Tuple[Tuple[int, ...], ...]

SHAPES = {
    "I": ((1, 1, 1, 1),),
    "O": ((1, 1),
          (1, 1)),
    "T": ((0, 1, 0),
          (1, 1, 1)),
    "S": ((0, 1, 1),
          (1, 1, 0)),
    "Z": ((1, 1, 0),
          (0, 1, 1)),
    "J": ((1, 0, 0),
          (1, 1, 1)),
    "L": ((0, 0, 1),
          (1, 1, 1)),
}

def random_shape(rng: Optional[random.Random] = None) -> Shape:
    return (rng or random).choice(list(SHAPES.values()))

def rotate_cw(shape: Shape) -> Shape:
    """Quarter turn: transpose, then reverse the row order. Rows and columns swap."""
    return tuple(tuple(col) for col in zip(*shape))[::-1]

def shape_name(shape: Shape) -> str:
    for name, s in SHAPES.items():
        if s == shape: return name
    return "?"
