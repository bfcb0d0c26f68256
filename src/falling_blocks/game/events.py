from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .geometry import Orientation, PieceType


Coordinate = Tuple[int, int]


class GameState(Enum):
    IN_GAME = "in_game"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class PieceSpawned:
    piece_type: PieceType
    orientation: Orientation
    anchor: Coordinate


@dataclass(frozen=True)
class PieceMoved:
    anchor: Coordinate
    orientation: Orientation


@dataclass(frozen=True)
class PieceLocked:
    cells: Tuple[Coordinate, ...]


@dataclass(frozen=True)
class LinesCleared:
    count: int
    rows: Tuple[int, ...] = ()


@dataclass(frozen=True)
class LevelChanged:
    level: int


@dataclass(frozen=True)
class GameOver:
    pass


@dataclass(frozen=True)
class StateChanged:
    state: GameState


Event = Union[PieceSpawned, PieceMoved, PieceLocked, LinesCleared, LevelChanged, GameOver, StateChanged]
