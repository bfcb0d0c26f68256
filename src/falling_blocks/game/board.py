from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np


Coordinate = Tuple[int, int]

BOARD_WIDTH = 10
BOARD_HEIGHT = 25
HEADROOM = 4


class Board:
    """Occupancy grid of locked cells.

    Cells are addressed with 1-based ``(x, y)`` coordinates, ``y`` growing
    upwards. Column ``0``, column ``width + 1`` and row ``0`` are the walls and
    the floor: they are always blocked and never stored. Rows above ``height``
    are open space; a few of them are kept as a hidden band so that squares
    locked above the top row keep blocking the falling piece and settle back
    down when lines are cleared.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT, headroom: int = HEADROOM) -> None:
        self.width = int(width)
        self.height = int(height)
        self.headroom = int(headroom)
        # row index y - 1, column index x - 1
        self.grid = np.zeros((self.height + self.headroom, self.width), dtype=np.bool_)

    @classmethod
    def from_cells(cls, cells: Iterable[Coordinate], width: int = BOARD_WIDTH,
                   height: int = BOARD_HEIGHT, headroom: int = HEADROOM) -> "Board":
        board = cls(width, height, headroom)
        for cell in cells:
            board.set_occupied(cell)
        return board

    def is_inside(self, x: int, y: int) -> bool:
        return 1 <= x <= self.width and 1 <= y <= self.height

    def is_wall(self, x: int, y: int) -> bool:
        return x <= 0 or x >= self.width + 1 or y <= 0

    def is_blocked(self, pos: Coordinate) -> bool:
        x, y = pos
        if self.is_wall(x, y):
            return True
        if y > self.height + self.headroom:
            return False
        # empty headroom is open, squares locked up there still block
        return bool(self.grid[y - 1, x - 1])

    def can_place(self, cells: Iterable[Coordinate]) -> bool:
        return not any(self.is_blocked(cell) for cell in cells)

    def is_occupied(self, pos: Coordinate) -> bool:
        x, y = pos
        if not self.is_inside(x, y):
            raise IndexError(f"cell {pos} is outside the {self.width}x{self.height} board")
        return bool(self.grid[y - 1, x - 1])

    def is_row_full(self, y: int) -> bool:
        if not 1 <= y <= self.height:
            raise IndexError(f"row {y} is outside [1, {self.height}]")
        return bool(np.all(self.grid[y - 1, :]))

    def full_rows(self) -> List[int]:
        return [y for y in range(1, self.height + 1) if self.is_row_full(y)]

    def set_occupied(self, pos: Coordinate) -> None:
        x, y = pos
        if not (1 <= x <= self.width and 1 <= y <= self.height + self.headroom):
            raise IndexError(f"cannot lock cell {pos} outside the board")
        self.grid[y - 1, x - 1] = True

    def clear_rows_and_shift(self, rows: Sequence[int]) -> None:
        """Remove ``rows`` and drop everything above by the number removed below it."""
        if len(rows) == 0:
            return
        for y in rows:
            if not 1 <= y <= self.height:
                raise IndexError(f"row {y} is outside [1, {self.height}]")
        indices = sorted({y - 1 for y in rows})
        kept = np.delete(self.grid, indices, axis=0)
        fresh = np.zeros((len(indices), self.width), dtype=np.bool_)
        self.grid = np.vstack((kept, fresh))

    def clear_row_and_shift(self, y: int) -> None:
        self.clear_rows_and_shift([y])

    def occupied_cells(self) -> List[Coordinate]:
        rows, cols = np.nonzero(self.grid)
        return [(int(c) + 1, int(r) + 1) for r, c in zip(rows, cols)]

    def count_occupied(self) -> int:
        return int(np.count_nonzero(self.grid[: self.height]))

    def as_array(self) -> np.ndarray:
        """Visible field as a ``(height, width)`` array, row 0 being the bottom row."""
        return self.grid[: self.height].copy()

    def copy(self) -> "Board":
        new_board = Board(self.width, self.height, self.headroom)
        new_board.grid = self.grid.copy()
        return new_board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))
