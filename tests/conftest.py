"""Shared fixtures for the termsnake tests."""

import numpy as np
import pytest

from termsnake.config import LEFT
from termsnake.field import Field
from termsnake.game import GameState


@pytest.fixture
def make_state():
    """
    Factory for a GameState with a straight snake seeded at `head`
    (body trailing towards increasing indices).
    """
    def _make(width=5, height=5, head=12, length=1, direction=LEFT,
              food_pos=0, interval=100, last_tick=0):
        field = Field.create(width, height)
        field.seed_snake(head, length)
        return GameState(
            width=width,
            height=height,
            field=field,
            snake_len=length,
            initial_snake_len=length,
            snake_head_pos=head,
            food_pos=food_pos,
            direction=direction,
            tick_interval_ms=interval,
            last_tick_ms=last_tick,
        )
    return _make


@pytest.fixture
def rng():
    return np.random.default_rng(0)
