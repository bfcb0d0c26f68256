from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Action, ActionState, FallingBlockGame, GameConfig, PieceType, ScoringRules
from falling_blocks.game.events import Event


# Discrete choice -> action held during that frame (None: nothing held)
DISCRETE_ACTIONS: Tuple[Optional[Action], ...] = (
    None,
    Action.LEFT,
    Action.RIGHT,
    Action.DOWN,
    Action.ROTATE_CW,
    Action.ROTATE_CCW,
)


class FallingBlockEnv(gym.Env):
    """Frame-stepped driver around :class:`FallingBlockGame`.

    Each ``step`` holds one abstract action for ``frame_time`` seconds. Holding
    the same action on consecutive steps behaves like a held key (auto-repeat,
    sustained soft drop); switching actions produces press/release edges.
    Reward is the engine score gained during the frame.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None,
                 render_mode: Optional[str] = None, frame_time: float = 1.0 / 30.0,
                 max_episode_steps: int = 20000) -> None:
        super().__init__()
        if frame_time <= 0:
            raise ValueError(f"frame_time must be positive, got {frame_time}")
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.render_mode = render_mode
        self.frame_time = float(frame_time)
        self.max_episode_steps = int(max_episode_steps)

        self.game = FallingBlockGame(self.config, self.rules)
        self.actions = ActionState()
        self._steps = 0

        h, w = self.config.height, self.config.width
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=-len(PieceType), high=1, shape=(h, w), dtype=np.int8),
                "next_piece": spaces.Discrete(len(PieceType) + 1),
            }
        )
        self.action_space = spaces.Discrete(len(DISCRETE_ACTIONS))

    def _get_obs(self) -> Dict[str, Any]:
        return {
            "grid": self.game.get_state(),
            "next_piece": int(self.game.next_piece_type),
        }

    def _get_info(self, events: Optional[List[Event]] = None) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "level": self.game.level,
            "lines_cleared": self.game.lines_cleared,
            "steps": self._steps,
            "events": list(events or []),
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        game_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.game = FallingBlockGame(replace(self.config, random_seed=game_seed), self.rules)
        self.actions = ActionState()
        self._steps = 0
        events = self.game.tick(0.0, self.actions)
        return self._get_obs(), self._get_info(events)

    def step(self, action: int):
        index = int(action)
        if not 0 <= index < len(DISCRETE_ACTIONS):
            raise ValueError(f"invalid action {action!r}, expected 0..{len(DISCRETE_ACTIONS) - 1}")
        held = DISCRETE_ACTIONS[index]
        self.actions.update(() if held is None else (held,))

        score_before = self.game.score
        events = self.game.tick(self.frame_time, self.actions)
        self._steps += 1

        reward = float(self.game.score - score_before)
        terminated = self.game.game_over
        truncated = self._steps >= self.max_episode_steps and not terminated
        return self._get_obs(), reward, terminated, truncated, self._get_info(events)

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self.game.get_state()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                row = h - 1 - y  # y grows upwards on the board
                for x in range(w):
                    if grid[y, x] > 0:
                        color = (150, 150, 160)
                    elif grid[y, x] < 0:
                        color = (70, 200, 120)
                    else:
                        color = (30, 30, 36)
                    img[row * cell : (row + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass
