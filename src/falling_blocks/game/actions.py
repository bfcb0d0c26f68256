from __future__ import annotations

from enum import IntEnum
from typing import FrozenSet, Iterable, Protocol


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    DOWN = 2
    ROTATE_CW = 3
    ROTATE_CCW = 4
    PAUSE = 5


class ActionInput(Protocol):
    def pressed(self, action: Action) -> bool: ...

    def just_pressed(self, action: Action) -> bool: ...

    def just_released(self, action: Action) -> bool: ...


class ActionState:
    """Held/edge state of the abstract actions for one frame.

    Call ``update`` once per frame with the actions currently held; the
    just-pressed and just-released edges are derived from the previous frame.
    """

    def __init__(self, held: Iterable[Action] = ()) -> None:
        self._held: FrozenSet[Action] = frozenset()
        self._previous: FrozenSet[Action] = frozenset()
        self.update(held)

    def update(self, held: Iterable[Action]) -> "ActionState":
        self._previous = self._held
        self._held = frozenset(held)
        return self

    def pressed(self, action: Action) -> bool:
        return action in self._held

    def just_pressed(self, action: Action) -> bool:
        return action in self._held and action not in self._previous

    def just_released(self, action: Action) -> bool:
        return action in self._previous and action not in self._held

    @property
    def held(self) -> FrozenSet[Action]:
        return self._held

    def __repr__(self) -> str:
        names = sorted(a.name for a in self._held)
        return f"ActionState(held={names})"
