from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .board import Board


@dataclass(frozen=True)
class LineClearResult:
    rows: Tuple[int, ...]

    @property
    def count(self) -> int:
        return len(self.rows)


def clear_lines(board: Board) -> LineClearResult:
    """Remove every full row and settle the rest in a single pass.

    All full rows are found before the board is touched; every remaining
    cell then drops by the number of cleared rows below it.
    """
    rows = tuple(board.full_rows())
    board.clear_rows_and_shift(rows)
    return LineClearResult(rows=rows)
