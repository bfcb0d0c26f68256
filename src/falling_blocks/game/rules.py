from __future__ import annotations

import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)


@dataclass
class ScoringRules:
    lines_per_level: int = 10
    base_down_duration: float = 0.5
    down_duration_step: float = 0.05
    # 0.5 - 0.05 * level reaches zero at level 10
    min_down_duration: float = 0.05
    line_points: int = 7
    tetris_points: int = 10

    def level_for_lines(self, lines: int) -> int:
        return lines // self.lines_per_level + 1

    def down_duration(self, level: int) -> float:
        return max(self.min_down_duration, self.base_down_duration - self.down_duration_step * level)

    def score_for_lines(self, lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        per_line = self.tetris_points if lines == 4 else self.line_points
        return level * lines * per_line


@dataclass
class Progression:
    """Cumulative lines, level and score of one game."""

    rules: ScoringRules
    lines: int = 0
    level: int = 1
    score: int = 0

    @property
    def down_duration(self) -> float:
        return self.rules.down_duration(self.level)

    def record(self, cleared: int) -> bool:
        """Account for one line-clear report; returns True when the level changed."""
        if cleared < 0:
            raise ValueError(f"cleared line count must be non-negative, got {cleared}")
        old_level = self.level
        self.lines += cleared
        self.level = self.rules.level_for_lines(self.lines)
        self.score += self.rules.score_for_lines(cleared, self.level)
        if cleared:
            logger.info("completed: %d\tlevel: %d\tscore: %d", self.lines, self.level, self.score)
        return self.level != old_level
