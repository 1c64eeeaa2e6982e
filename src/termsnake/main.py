# main.py
import argparse
import logging
import re
import sys
import time
from typing import Callable, List, Optional

import numpy as np  # type: ignore

from .clock import is_due, monotonic_ms
from .config import (
    BORDER, DEFAULT_DIFFICULTY, MIN_DIFFICULTY, MAX_DIFFICULTY, FRAME_SLEEP_S,
    HELPTEXT, KEY_BINDINGS, PAUSE_KEY, QUIT_KEY, Config,
)
from .errors import InvalidArgument, SnakeError
from .game import GameState, Outcome, game_score, latch_direction, make_rng, new_game_state, step_game
from .screen import TerminalSession, open_session

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


# --------------------------
# Game loop
# --------------------------
def run(
    state: GameState,
    session: TerminalSession,
    rng: np.random.Generator,
    clock: Callable[[], int] = monotonic_ms,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Poll input every iteration, advance the game whenever a tick is due, and
    redraw after each advance. Returns the final score on quit or game over.
    """
    while True:
        # 1) input
        ch = session.poll_key()
        if ch == QUIT_KEY:
            logger.debug("quit requested")
            break
        if ch in KEY_BINDINGS:
            latch_direction(state, KEY_BINDINGS[ch])
        elif ch == PAUSE_KEY:
            session.show_paused()
            continue

        # 2) update + render, gated on the tick interval
        if is_due(state, clock()):
            if step_game(state, rng) is Outcome.GAME_OVER:
                logger.info("game over, score=%d", game_score(state))
                session.show_game_over(game_score(state))
                break
            session.draw_field(state)

        sleep(FRAME_SLEEP_S)

    return game_score(state)

def play(cfg: Config) -> int:
    """Open the terminal, play one game sized to it, and return the score."""
    with open_session() as session:
        rows, cols = session.dimensions()
        now = monotonic_ms()
        state = new_game_state(cols - 2 * BORDER, rows - 2 * BORDER, cfg.difficulty, now)
        rng = make_rng(cfg.seed, now)
        return run(state, session, rng)


# --------------------------
# Command line
# --------------------------
class _HelpAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print(HELPTEXT)
        parser.exit()

def parse_int(text: str) -> int:
    """Leading integer of `text` (like C atoi); 0 when there is none."""
    m = _LEADING_INT.match(text)
    return int(m.group(1)) if m else 0

def parse_difficulty(text: str) -> int:
    """Value of -d; InvalidArgument outside 0..11."""
    val = parse_int(text)
    # 11 is accepted even though the help text says 10
    if val < MIN_DIFFICULTY or val > MAX_DIFFICULTY:
        raise InvalidArgument(f"Invalid difficulty '{val}': Must be between 0 and 10")
    return val

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termsnake", add_help=False)
    parser.add_argument("-h", action=_HelpAction, help="Print help")
    parser.add_argument(
        "-d",
        dest="difficulty",
        type=parse_difficulty,
        default=DEFAULT_DIFFICULTY,
        metavar="num",
        help="Set difficulty (speed), 0 to 10. Default: 5",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for food placement (default: taken from the clock)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write debug logs to this file",
    )
    return parser

def parse_options(argv: Optional[List[str]] = None) -> Config:
    args = build_parser().parse_args(argv)
    return Config(
        difficulty=args.difficulty,
        seed=args.seed,
        log_file=args.log_file,
    )

def setup_logging(log_file: Optional[str]) -> None:
    # curses owns the terminal, so logs only ever go to a file
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def main(argv: Optional[List[str]] = None) -> int:
    try:
        cfg = parse_options(argv)
    except InvalidArgument as e:
        print(e, file=sys.stderr)
        return 1

    setup_logging(cfg.log_file)
    logger.info("starting: difficulty=%d seed=%s", cfg.difficulty, cfg.seed)

    try:
        score = play(cfg)
    except SnakeError as e:
        logger.error("aborted: %s", e)
        print(f"termsnake: {e}", file=sys.stderr)
        return 1

    print(f"Score: {score}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
