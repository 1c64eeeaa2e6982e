# screen.py
from contextlib import contextmanager
from typing import Iterator, Tuple
import curses
import logging

from .config import BORDER, SNAKE_CH, FOOD_CH, EMPTY_CH
from .game import GameState

logger = logging.getLogger(__name__)


class TerminalSession:
    """
    Thin wrapper over a curses window. Writes are buffered until refresh().
    """

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def dimensions(self) -> Tuple[int, int]:
        """(rows, columns) of the terminal."""
        return self.stdscr.getmaxyx()

    def poll_key(self) -> int:
        """Next key code, or -1 when nothing is pending (window is in nodelay mode)."""
        return self.stdscr.getch()

    def draw_border(self) -> None:
        self.stdscr.border(0, 0, 0, 0, 0, 0, 0, 0)

    def draw_field(self, state: GameState) -> None:
        for y, row in enumerate(state.field.rows()):
            for x, value in enumerate(row):
                if value > 0:
                    ch = SNAKE_CH
                elif y * state.width + x == state.food_pos:
                    ch = FOOD_CH
                else:
                    ch = EMPTY_CH
                self._put(BORDER + y, BORDER + x, ch)
        self.stdscr.refresh()

    def show_paused(self) -> None:
        """Overlay the pause banner and block until any key is pressed."""
        self.stdscr.nodelay(False)
        rows, cols = self.dimensions()
        self._put(rows // 2, cols // 2 - 6, " GAME PAUSED ")
        self.stdscr.refresh()
        self.stdscr.getch()
        self.stdscr.nodelay(True)

    def show_game_over(self, score: int) -> None:
        """Overlay the game-over banner with the score and block until a key."""
        self.stdscr.nodelay(False)
        rows, cols = self.dimensions()
        score_line = f" Score: {score} "
        self._put(rows // 2 - 1, cols // 2 - 5, " GAME OVER ")
        self._put(rows // 2, cols // 2 - len(score_line) // 2, score_line)
        self.stdscr.refresh()
        self.stdscr.getch()

    def _put(self, y: int, x: int, text: str) -> None:
        # curses raises when writing the bottom-right cell or off-screen; skip those cells
        try:
            self.stdscr.addstr(y, x, text)
        except curses.error:
            pass


def _hide_cursor() -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("terminal cannot hide the cursor")

@contextmanager
def open_session() -> Iterator[TerminalSession]:
    """
    Put the terminal in raw, no-echo, non-blocking mode with a hidden cursor
    and a border, and restore it on exit.
    """
    stdscr = curses.initscr()
    try:
        curses.noecho()
        curses.cbreak()
        stdscr.keypad(True)
        stdscr.nodelay(True)
        _hide_cursor()

        session = TerminalSession(stdscr)
        session.draw_border()
        logger.debug("terminal session opened, size=%s", session.dimensions())
        yield session
    finally:
        stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        logger.debug("terminal session closed")
