"""Tests for the gymnasium driver."""

import gymnasium as gym
import numpy as np
import pytest

from falling_blocks.env import DISCRETE_ACTIONS, ENV_ID, FallingBlockEnv
from falling_blocks.game import Action, PieceSpawned


def test_reset_observation():
    env = FallingBlockEnv()
    obs, info = env.reset(seed=1)
    assert obs["grid"].shape == (25, 10)
    assert obs["grid"].dtype == np.int8
    assert 1 <= obs["next_piece"] <= 7
    assert env.observation_space.contains(obs)
    assert isinstance(info["events"][0], PieceSpawned)
    assert (obs["grid"] < 0).sum() == 4


def test_same_seed_same_game():
    a, b = FallingBlockEnv(), FallingBlockEnv()
    obs_a, _ = a.reset(seed=3)
    obs_b, _ = b.reset(seed=3)
    assert obs_a["next_piece"] == obs_b["next_piece"]
    assert np.array_equal(obs_a["grid"], obs_b["grid"])


def test_invalid_action_raises():
    env = FallingBlockEnv()
    env.reset(seed=0)
    with pytest.raises(ValueError):
        env.step(len(DISCRETE_ACTIONS))


def test_idle_episode_terminates():
    env = FallingBlockEnv(frame_time=0.5)
    env.reset(seed=0)
    total = 0.0
    for _ in range(5000):
        obs, reward, terminated, truncated, info = env.step(0)
        total += reward
        if terminated:
            break
    assert terminated
    assert not truncated
    assert total == 0.0
    assert info["lines_cleared"] == 0


def test_truncation():
    env = FallingBlockEnv(max_episode_steps=3)
    env.reset(seed=0)
    results = [env.step(0) for _ in range(3)]
    assert not results[1][3]
    assert results[2][3]


def test_held_left_moves_piece_once_then_repeats():
    env = FallingBlockEnv(frame_time=0.05)
    env.reset(seed=0)
    left = DISCRETE_ACTIONS.index(Action.LEFT)
    start = env.game.piece.anchor
    env.step(left)
    assert env.game.piece.anchor[0] == start[0] - 1
    env.step(left)
    assert env.game.piece.anchor[0] == start[0] - 1


def test_registered_and_renders():
    env = gym.make(ENV_ID, render_mode="rgb_array")
    env.reset(seed=0)
    img = env.render()
    assert img.shape == (25 * 12, 10 * 12, 3)
    env.close()
