"""Tests for the curses terminal session, with curses mocked out."""

import curses
from unittest.mock import MagicMock, call, patch

import pytest

from termsnake.screen import TerminalSession, open_session


@pytest.fixture
def stdscr():
    win = MagicMock()
    win.getmaxyx.return_value = (24, 80)
    return win


class TestTerminalSession:

    def test_dimensions_and_poll(self, stdscr):
        stdscr.getch.return_value = -1
        session = TerminalSession(stdscr)
        assert session.dimensions() == (24, 80)
        assert session.poll_key() == -1

    def test_draw_field_offsets_by_border(self, stdscr, make_state):
        """Body is '#', food 'o', empty ' ', each shifted one cell for the border."""
        state = make_state(width=3, height=2, head=4, length=2, food_pos=0)
        TerminalSession(stdscr).draw_field(state)

        stdscr.addstr.assert_has_calls([
            call(1, 1, "o"), call(1, 2, " "), call(1, 3, " "),
            call(2, 1, " "), call(2, 2, "#"), call(2, 3, "#"),
        ])
        assert stdscr.addstr.call_count == 6
        stdscr.refresh.assert_called_once()

    def test_pause_blocks_then_restores_nodelay(self, stdscr):
        TerminalSession(stdscr).show_paused()
        stdscr.addstr.assert_called_once_with(12, 34, " GAME PAUSED ")
        assert stdscr.nodelay.call_args_list == [call(False), call(True)]
        stdscr.getch.assert_called_once()

    def test_game_over_shows_score(self, stdscr):
        TerminalSession(stdscr).show_game_over(12)
        stdscr.addstr.assert_any_call(11, 35, " GAME OVER ")
        stdscr.addstr.assert_any_call(12, 35, " Score: 12 ")
        stdscr.nodelay.assert_called_once_with(False)
        stdscr.getch.assert_called_once()

    def test_writes_off_screen_are_ignored(self, stdscr):
        """curses errors from writing outside the window do not propagate."""
        stdscr.addstr.side_effect = curses.error
        TerminalSession(stdscr).show_game_over(3)
        stdscr.refresh.assert_called_once()


class TestOpenSession:

    def test_sets_up_and_restores_terminal(self, stdscr):
        with patch("termsnake.screen.curses") as fake:
            fake.initscr.return_value = stdscr
            with open_session() as session:
                assert session.stdscr is stdscr
                fake.noecho.assert_called_once()
                fake.cbreak.assert_called_once()
                fake.curs_set.assert_called_once_with(0)
                stdscr.keypad.assert_called_once_with(True)
                stdscr.nodelay.assert_called_once_with(True)
                stdscr.border.assert_called_once()
            fake.endwin.assert_called_once()
            fake.echo.assert_called_once()

    def test_restores_terminal_on_error(self, stdscr):
        with patch("termsnake.screen.curses") as fake:
            fake.initscr.return_value = stdscr
            with pytest.raises(RuntimeError):
                with open_session():
                    raise RuntimeError("boom")
            fake.endwin.assert_called_once()
