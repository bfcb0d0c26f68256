from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class RepeatTimer:
    """Repeating countdown kept as a plain value.

    ``advance`` returns whether the timer lapsed during ``dt`` together with the
    new timer. It fires at most once per call: leftover time past one period
    is kept modulo the duration instead of producing extra fires.
    """

    duration: float
    elapsed: float = 0.0

    def advance(self, dt: float) -> Tuple[bool, "RepeatTimer"]:
        if dt < 0:
            raise ValueError(f"elapsed time must be non-negative, got {dt}")
        total = self.elapsed + dt
        if total < self.duration:
            return False, replace(self, elapsed=total)
        return True, replace(self, elapsed=total % self.duration)

    def reset(self) -> "RepeatTimer":
        return replace(self, elapsed=0.0)

    def with_duration(self, duration: float) -> "RepeatTimer":
        if duration <= 0:
            raise ValueError(f"timer duration must be positive, got {duration}")
        return replace(self, duration=float(duration))

    @property
    def remaining(self) -> float:
        return max(0.0, self.duration - self.elapsed)
