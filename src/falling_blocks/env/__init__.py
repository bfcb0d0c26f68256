"""Gymnasium environment driving the Falling Blocks engine."""

from __future__ import annotations

from gymnasium.envs.registration import register

from .falling_block_env import DISCRETE_ACTIONS, FallingBlockEnv

ENV_ID = "FallingBlocks-10x25-v0"

register(
    id=ENV_ID,
    entry_point="falling_blocks.env.falling_block_env:FallingBlockEnv",
)

__all__ = ["ENV_ID", "FallingBlockEnv", "DISCRETE_ACTIONS"]
