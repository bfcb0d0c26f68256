from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from .geometry import Orientation, PieceType, Rotation, shape_for, type_anchor


Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class Piece:
    piece_type: PieceType
    orientation: Orientation = Orientation.UP
    anchor: Coordinate = (0, 0)

    def cells(self) -> List[Coordinate]:
        return self.cells_at(self.orientation, self.anchor)

    def cells_at(self, orientation: Optional[Orientation] = None,
                 anchor: Optional[Coordinate] = None) -> List[Coordinate]:
        """Absolute cells in slot order for the given orientation and anchor."""
        if orientation is None:
            orientation = self.orientation
        if anchor is None:
            anchor = self.anchor
        ax, ay = anchor
        tx, ty = type_anchor(self.piece_type)
        return [(ax + tx + dx, ay + ty + dy) for dx, dy in shape_for(self.piece_type, orientation)]

    def translated(self, dx: int, dy: int) -> "Piece":
        x, y = self.anchor
        return replace(self, anchor=(x + dx, y + dy))

    def rotated(self, direction: Rotation) -> "Piece":
        return replace(self, orientation=self.orientation.apply(direction))


def occupied_cells(piece: Piece) -> List[Coordinate]:
    return piece.cells()


class PieceQueue:
    """Uniform random piece types with a one-piece preview."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.next_type = self._draw()

    def _draw(self) -> PieceType:
        return self.rng.choice(list(PieceType))

    def pop(self) -> PieceType:
        current = self.next_type
        self.next_type = self._draw()
        return current
