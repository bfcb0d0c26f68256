from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple

Offset = Tuple[int, int]
Shape = Tuple[Offset, Offset, Offset, Offset]


class PieceType(IntEnum):
    SQUARE = 1
    T = 2
    L = 3
    INV_L = 4  # J
    BAR = 5    # I
    S = 6
    INV_S = 7  # Z


class Rotation(IntEnum):
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1


class Orientation(IntEnum):
    UP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3

    def apply(self, direction: Rotation) -> "Orientation":
        return Orientation((self.value + int(direction)) % 4)


def rotate(orientation: Orientation, direction: Rotation) -> Orientation:
    """Advance (clockwise) or retreat (counter-clockwise) one step in the cycle."""
    return orientation.apply(direction)


# y grows upwards. Each row lists the four cells in slot order. For T, L and
# INV_L slot i of an orientation is where slot i of the previous orientation
# lands after a clockwise quarter turn about (0, 0). BAR, S and INV_S only
# have a flat and an upright tuple: the upright one is the quarter turn of the
# flat one slot by slot, and BOTTOM/LEFT reuse them. SQUARE never changes.
_BAR_FLAT: Shape = ((-1, 0), (0, 0), (1, 0), (2, 0))
_BAR_UPRIGHT: Shape = ((0, 1), (0, 0), (0, -1), (0, -2))
_S_FLAT: Shape = ((-1, 0), (0, 0), (0, -1), (1, -1))
_S_UPRIGHT: Shape = ((0, 1), (0, 0), (-1, 0), (-1, -1))
_INV_S_FLAT: Shape = ((0, 0), (1, 0), (-1, -1), (0, -1))
_INV_S_UPRIGHT: Shape = ((0, 0), (0, -1), (-1, 1), (-1, 0))
_SQUARE: Shape = ((0, 1), (1, 1), (0, 0), (1, 0))

SHAPES: Dict[PieceType, Dict[Orientation, Shape]] = {
    PieceType.SQUARE: {
        Orientation.UP: _SQUARE,
        Orientation.RIGHT: _SQUARE,
        Orientation.BOTTOM: _SQUARE,
        Orientation.LEFT: _SQUARE,
    },
    PieceType.T: {
        Orientation.UP: ((0, 1), (-1, 0), (0, 0), (1, 0)),
        Orientation.RIGHT: ((1, 0), (0, 1), (0, 0), (0, -1)),
        Orientation.BOTTOM: ((0, -1), (1, 0), (0, 0), (-1, 0)),
        Orientation.LEFT: ((-1, 0), (0, -1), (0, 0), (0, 1)),
    },
    PieceType.L: {
        Orientation.UP: ((-1, 0), (0, 0), (1, 0), (1, -1)),
        Orientation.RIGHT: ((0, 1), (0, 0), (0, -1), (-1, -1)),
        Orientation.BOTTOM: ((1, 0), (0, 0), (-1, 0), (-1, 1)),
        Orientation.LEFT: ((0, -1), (0, 0), (0, 1), (1, 1)),
    },
    PieceType.INV_L: {
        Orientation.UP: ((-1, 0), (0, 0), (1, 0), (-1, -1)),
        Orientation.RIGHT: ((0, 1), (0, 0), (0, -1), (-1, 1)),
        Orientation.BOTTOM: ((1, 0), (0, 0), (-1, 0), (1, 1)),
        Orientation.LEFT: ((0, -1), (0, 0), (0, 1), (1, -1)),
    },
    PieceType.BAR: {
        Orientation.UP: _BAR_FLAT,
        Orientation.RIGHT: _BAR_UPRIGHT,
        Orientation.BOTTOM: _BAR_FLAT,
        Orientation.LEFT: _BAR_UPRIGHT,
    },
    PieceType.S: {
        Orientation.UP: _S_FLAT,
        Orientation.RIGHT: _S_UPRIGHT,
        Orientation.BOTTOM: _S_FLAT,
        Orientation.LEFT: _S_UPRIGHT,
    },
    PieceType.INV_S: {
        Orientation.UP: _INV_S_FLAT,
        Orientation.RIGHT: _INV_S_UPRIGHT,
        Orientation.BOTTOM: _INV_S_FLAT,
        Orientation.LEFT: _INV_S_UPRIGHT,
    },
}

# Shifts the rotation pivot so that pieces whose pivot is not their top row
# (square, T) still spawn with their top row on the anchor row.
TYPE_ANCHORS: Dict[PieceType, Offset] = {
    PieceType.SQUARE: (0, -1),
    PieceType.T: (0, -1),
    PieceType.L: (0, 0),
    PieceType.INV_L: (0, 0),
    PieceType.BAR: (0, 0),
    PieceType.S: (0, 0),
    PieceType.INV_S: (0, 0),
}


def shape_for(piece_type: PieceType, orientation: Orientation) -> Shape:
    return SHAPES[piece_type][orientation]


def type_anchor(piece_type: PieceType) -> Offset:
    return TYPE_ANCHORS[piece_type]


def distinct_shapes(piece_type: PieceType) -> int:
    """Number of different silhouettes the piece takes over a full turn."""
    return len({frozenset(shape) for shape in SHAPES[piece_type].values()})
