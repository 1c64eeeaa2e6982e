"""Terminal Snake game."""

import logging

from .errors import SnakeError, InvalidArgument, InvalidDimensions, NoEmptyCell
from .field import Field
from .game import GameState, Outcome, new_game_state, step_game, game_score

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SnakeError", "InvalidArgument", "InvalidDimensions", "NoEmptyCell",
    "Field", "GameState", "Outcome", "new_game_state", "step_game", "game_score",
]
