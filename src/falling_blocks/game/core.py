from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .actions import Action, ActionInput, ActionState
from .board import BOARD_HEIGHT, BOARD_WIDTH, HEADROOM, Board
from .clearing import clear_lines
from .events import (
    Event,
    GameOver,
    GameState,
    LevelChanged,
    LinesCleared,
    PieceLocked,
    PieceMoved,
    PieceSpawned,
    StateChanged,
)
from .geometry import Orientation, PieceType, Rotation
from .pieces import Piece, PieceQueue
from .rules import Progression, ScoringRules
from .timers import RepeatTimer


logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


@dataclass
class GameConfig:
    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    random_seed: Optional[int] = None
    headroom: int = HEADROOM
    # held left/right: first repeat waits longer than the following ones
    first_repeat_delay: float = 0.25
    repeat_delay: float = 0.1
    soft_drop_interval: float = 0.03


class FallingBlockGame:
    """Tick-driven rules engine: one falling piece over a board of locked cells.

    ``tick`` is the only mutating entry point. Everything else is a read-only
    query meant for renderers and other drivers.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None,
                 board: Optional[Board] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        if board is None:
            board = Board(self.config.width, self.config.height, self.config.headroom)
        self.board = board
        self.queue = PieceQueue(self.rng)
        self.progression = Progression(self.rules)
        self.piece: Optional[Piece] = None
        self.state = GameState.IN_GAME
        self.gravity = RepeatTimer(self.progression.down_duration)
        self.shift_timer = RepeatTimer(self.config.first_repeat_delay)

    @property
    def spawn_anchor(self) -> Coordinate:
        return (self.board.width // 2, self.board.height)

    @property
    def score(self) -> int:
        return self.progression.score

    @property
    def level(self) -> int:
        return self.progression.level

    @property
    def lines_cleared(self) -> int:
        return self.progression.lines

    @property
    def next_piece_type(self) -> PieceType:
        return self.queue.next_type

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def piece_cells(self) -> List[Coordinate]:
        if self.piece is None:
            return []
        return self.piece.cells()

    def tick(self, dt: float, actions: Optional[ActionInput] = None) -> List[Event]:
        """Advance the game by ``dt`` seconds under the given action state."""
        if dt < 0:
            raise ValueError(f"elapsed time must be non-negative, got {dt}")
        if actions is None:
            actions = ActionState()
        events: List[Event] = []

        if self.state is GameState.GAME_OVER:
            return events
        if actions.just_pressed(Action.PAUSE):
            self.state = GameState.PAUSED if self.state is GameState.IN_GAME else GameState.IN_GAME
            logger.debug("state changed to %s", self.state.value)
            events.append(StateChanged(self.state))
            # Down edges are not seen while paused
            self._sync_soft_drop(actions)
            return events
        if self.state is GameState.PAUSED:
            return events

        if self.piece is None:
            self._spawn(events)
            if self.game_over:
                return events

        self._apply_soft_drop(actions)
        self._apply_rotation(actions, events)
        self._apply_shift(dt, actions, events)
        self._apply_gravity(dt, events)
        return events

    def _spawn(self, events: List[Event]) -> None:
        piece_type = self.queue.pop()
        self.piece = Piece(piece_type, Orientation.UP, self.spawn_anchor)
        logger.debug("spawned %s at %s", piece_type.name, self.spawn_anchor)
        events.append(PieceSpawned(piece_type, self.piece.orientation, self.piece.anchor))
        if not self.board.can_place(self.piece.cells()):
            self._end_game(events)

    def _end_game(self, events: List[Event]) -> None:
        assert self.piece is not None
        # the overlapping piece stays visible as settled squares
        for x, y in self.piece.cells():
            if not self.board.is_wall(x, y):
                self.board.set_occupied((x, y))
        self.piece = None
        self.state = GameState.GAME_OVER
        logger.info("game over: lines %d, level %d, score %d", self.lines_cleared, self.level, self.score)
        events.append(GameOver())

    def _try_commit(self, candidate: Piece, events: List[Event]) -> bool:
        if not self.board.can_place(candidate.cells()):
            return False
        self.piece = candidate
        events.append(PieceMoved(candidate.anchor, candidate.orientation))
        return True

    def _apply_soft_drop(self, actions: ActionInput) -> None:
        if actions.just_pressed(Action.DOWN):
            self.gravity = self.gravity.with_duration(self.config.soft_drop_interval)
        if actions.just_released(Action.DOWN):
            self.gravity = self.gravity.with_duration(self.progression.down_duration)

    def _sync_soft_drop(self, actions: ActionInput) -> None:
        if actions.pressed(Action.DOWN):
            self.gravity = self.gravity.with_duration(self.config.soft_drop_interval)
        else:
            self.gravity = self.gravity.with_duration(self.progression.down_duration)

    def _apply_rotation(self, actions: ActionInput, events: List[Event]) -> None:
        if self.piece is None:
            return
        if actions.just_pressed(Action.ROTATE_CW):
            direction = Rotation.CLOCKWISE
        elif actions.just_pressed(Action.ROTATE_CCW):
            direction = Rotation.COUNTER_CLOCKWISE
        else:
            return
        self._try_commit(self.piece.rotated(direction), events)

    def _apply_shift(self, dt: float, actions: ActionInput, events: List[Event]) -> None:
        if self.piece is None:
            return
        direction = 0
        if actions.just_pressed(Action.LEFT):
            direction = -1
        elif actions.just_pressed(Action.RIGHT):
            direction = 1

        if direction:
            self.shift_timer = RepeatTimer(self.config.first_repeat_delay)
        elif actions.pressed(Action.LEFT) or actions.pressed(Action.RIGHT):
            fired, self.shift_timer = self.shift_timer.advance(dt)
            if fired:
                direction = -1 if actions.pressed(Action.LEFT) else 1
                self.shift_timer = RepeatTimer(self.config.repeat_delay)

        if direction:
            self._try_commit(self.piece.translated(direction, 0), events)

    def _apply_gravity(self, dt: float, events: List[Event]) -> None:
        fired, self.gravity = self.gravity.advance(dt)
        if not fired or self.piece is None:
            return
        cells = self.piece.cells()
        if any(self.board.is_blocked(cell) for cell in cells):
            self._end_game(events)
        elif any(self.board.is_blocked((x, y - 1)) for x, y in cells):
            self._lock(events)
        else:
            self.piece = self.piece.translated(0, -1)
            events.append(PieceMoved(self.piece.anchor, self.piece.orientation))

    def _lock(self, events: List[Event]) -> None:
        assert self.piece is not None
        cells = tuple(self.piece.cells())
        for cell in cells:
            self.board.set_occupied(cell)
        self.piece = None
        logger.debug("locked piece at %s", cells)
        events.append(PieceLocked(cells))

        result = clear_lines(self.board)
        events.append(LinesCleared(result.count, result.rows))
        if self.progression.record(result.count):
            logger.info("level up: %d", self.level)
            events.append(LevelChanged(self.level))
        # soft drop ends with the piece that was dropping
        self.gravity = self.gravity.with_duration(self.progression.down_duration)

        self._spawn(events)

    def get_state(self) -> np.ndarray:
        """Visible field, row 0 at the bottom: 0 empty, 1 locked, ``-piece_type`` falling."""
        state = self.board.as_array().astype(np.int8)
        if self.piece is not None:
            for x, y in self.piece.cells():
                if self.board.is_inside(x, y):
                    state[y - 1, x - 1] = -int(self.piece.piece_type)
        return state
