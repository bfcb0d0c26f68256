"""Falling Blocks: rules engine of a falling-block puzzle game."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
