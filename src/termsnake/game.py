# game.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import (
    DIFFICULTY_MSECS, MIN_DIFFICULTY, MAX_DIFFICULTY, MAX_INITIAL_SNAKE_LEN,
    UP, DOWN, LEFT, RIGHT,
)
from .field import Field

logger = logging.getLogger(__name__)


class Outcome(Enum):
    CONTINUE = "continue"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def tick_interval_ms(difficulty: int) -> int:
    """Tick interval for a difficulty; values outside 0..11 are clamped."""
    return DIFFICULTY_MSECS[max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, difficulty))]

def make_rng(seed: Optional[int], now_ms: int) -> np.random.Generator:
    """Food RNG, seeded from the millisecond part of the clock unless a seed is given."""
    if seed is None:
        seed = now_ms % 1000
    return np.random.default_rng(seed)

# ---------- State ----------
@dataclass
class GameState:
    width: int
    height: int
    field: Field
    snake_len: int
    initial_snake_len: int
    snake_head_pos: int            # linear index, row-major
    food_pos: Optional[int]        # None once the snake fills the board
    direction: Tuple[int, int]     # latched (dx, dy) for the next tick
    tick_interval_ms: int
    last_tick_ms: int              # monotonic ms of the last accepted tick

def new_game_state(width: int, height: int, difficulty: int, now_ms: int) -> GameState:
    """
    Straight snake of min(10, width) cells centred in the middle row, heading
    left, with the first food right in front of it.
    """
    field = Field.create(width, height)
    snake_len = min(MAX_INITIAL_SNAKE_LEN, width)
    head = height // 2 * width + (width // 2 - snake_len // 2)
    field.seed_snake(head, snake_len)

    state = GameState(
        width=width,
        height=height,
        field=field,
        snake_len=snake_len,
        initial_snake_len=snake_len,
        snake_head_pos=head,
        food_pos=max(0, head - 1),
        direction=LEFT,
        tick_interval_ms=tick_interval_ms(difficulty),
        last_tick_ms=now_ms,
    )
    logger.debug("new game %dx%d, snake_len=%d, tick=%dms",
                 width, height, snake_len, state.tick_interval_ms)
    return state

def game_score(state: GameState) -> int:
    # The extra -1 matches the scores the game has always reported.
    return state.snake_len - state.initial_snake_len - 1

# ---------- Input / Update ----------
def latch_direction(state: GameState, direction: Tuple[int, int]) -> None:
    """Remember the direction for the next tick. Reversing into the body is allowed."""
    state.direction = direction

def next_head_pos(state: GameState) -> Optional[int]:
    """
    Head position after one move in the latched direction, or None if the
    move leaves the field. Left/right edges are detected on the linear index.
    """
    pos, width = state.snake_head_pos, state.width
    d = state.direction
    if d == UP:
        cand = pos - width
        return cand if cand >= 0 else None
    if d == DOWN:
        cand = pos + width
        return cand if cand < state.field.size else None
    if d == LEFT:
        return pos - 1 if pos % width != 0 else None
    if d == RIGHT:
        return pos + 1 if (pos + 1) % width != 0 else None
    raise ValueError(f"Unknown direction: {d}")

def place_food(state: GameState, rng: np.random.Generator) -> None:
    """Put food on a uniformly random empty cell, scanned in row-major order."""
    empty = state.field.size - state.snake_len
    if empty <= 0:
        logger.debug("board full at snake_len=%d, no food placed", state.snake_len)
        state.food_pos = None
        return
    r = int(rng.integers(0, empty))
    state.food_pos = state.field.find_nth_empty(r)

def step_game(state: GameState, rng: np.random.Generator) -> Outcome:
    """
    Advance the game by one tick.
    - wall or body in the way: GAME_OVER, state untouched
    - food: grow by one, head written before the new food is placed
    - otherwise: head written, then the whole snake decays so the tail retracts
    Afterwards the head holds snake_len and the body counts down to 1.
    """
    cand = next_head_pos(state)

    # Wall collision
    if cand is None:
        logger.debug("hit the wall at %d", state.snake_head_pos)
        return Outcome.GAME_OVER

    # Self collision
    if not state.field.is_empty(cand):
        logger.debug("hit the body at %d", cand)
        return Outcome.GAME_OVER

    state.snake_head_pos = cand

    # Move / grow
    if cand == state.food_pos:
        state.snake_len += 1
        state.field.occupy(cand, state.snake_len)
        place_food(state, rng)
        logger.debug("ate food at %d, snake_len=%d, next food at %s",
                     cand, state.snake_len, state.food_pos)
    else:
        # head decays to snake_len together with the body; the tail reaches 0
        state.field.occupy(cand, state.snake_len + 1)
        state.field.decay()

    return Outcome.CONTINUE
