from dataclasses import dataclass
from typing import Optional
import curses

# ----- Difficulty -> tick interval (ms), index 0..11 -----
DIFFICULTY_MSECS = (300, 210, 180, 150, 130, 120, 100, 80, 60, 40, 30, 20)
MIN_DIFFICULTY, MAX_DIFFICULTY = 0, len(DIFFICULTY_MSECS) - 1
DEFAULT_DIFFICULTY = 5

# ----- Layout -----
BORDER = 1
MAX_INITIAL_SNAKE_LEN = 10

# ----- Loop pacing -----
FRAME_SLEEP_S = 0.005  # throttles non-blocking polling, unrelated to ticks

# ----- Glyphs -----
SNAKE_CH = "#"
FOOD_CH = "o"
EMPTY_CH = " "

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Keys -----
QUIT_KEY = ord("q")
PAUSE_KEY = ord(" ")
KEY_BINDINGS = {
    curses.KEY_UP: UP,    ord("w"): UP,
    curses.KEY_LEFT: LEFT, ord("a"): LEFT,
    curses.KEY_DOWN: DOWN, ord("s"): DOWN,
    curses.KEY_RIGHT: RIGHT, ord("d"): RIGHT,
}

HELPTEXT = (
    "A Snake game.\n\n"
    " Use arrow keys or 'w', 'a', 's', 'd' to move.\n"
    " Use Space to pause.\n"
    " Use 'q' to quit the game.\n\n"
    "Arguments:\n"
    " -h        Print help\n"
    " -d [num]  Set difficulty (speed), 0 to 10. Default: 5"
)

# ----- Tunables (set from the command line) -----
@dataclass
class Config:
    difficulty: int = DEFAULT_DIFFICULTY
    seed: Optional[int] = None      # None -> seeded from the clock
    log_file: Optional[str] = None
