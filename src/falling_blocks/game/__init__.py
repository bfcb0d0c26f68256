"""Game module for Falling Blocks.

Exports the rules engine and supporting classes:
- Board: occupancy grid, collision oracle and row clearing
- Piece, PieceType, Orientation, Rotation: falling piece and its geometry
- ScoringRules, Progression: lines, level, score and gravity speed
- Action, ActionState: abstract input consumed by the engine
- FallingBlockGame: tick-driven engine and run state machine
"""

from .actions import Action, ActionState
from .board import Board
from .clearing import LineClearResult, clear_lines
from .core import FallingBlockGame, GameConfig
from .events import (
    GameOver,
    GameState,
    LevelChanged,
    LinesCleared,
    PieceLocked,
    PieceMoved,
    PieceSpawned,
    StateChanged,
)
from .geometry import Orientation, PieceType, Rotation, rotate
from .pieces import Piece, PieceQueue, occupied_cells
from .rules import Progression, ScoringRules
from .timers import RepeatTimer

__all__ = [
    "Action",
    "ActionState",
    "Board",
    "LineClearResult",
    "clear_lines",
    "FallingBlockGame",
    "GameConfig",
    "GameOver",
    "GameState",
    "LevelChanged",
    "LinesCleared",
    "PieceLocked",
    "PieceMoved",
    "PieceSpawned",
    "StateChanged",
    "Orientation",
    "PieceType",
    "Rotation",
    "rotate",
    "Piece",
    "PieceQueue",
    "occupied_cells",
    "Progression",
    "ScoringRules",
    "RepeatTimer",
]
