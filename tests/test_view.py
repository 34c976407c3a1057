"""
Tests for the curses view, using a mocked screen.
"""

import curses
from unittest.mock import Mock, patch

import pytest

from gomodup.tui.controller import render
from gomodup.tui.events import KeyPress, Resize
from gomodup.tui.view import TUIView, translate_key

from tests.conftest import make_modules, make_state


@pytest.fixture
def stdscr():
    screen = Mock()
    screen.getmaxyx.return_value = (6, 30)
    return screen


@pytest.fixture
def view(stdscr):
    with patch("gomodup.tui.view.curses.curs_set"), \
            patch("gomodup.tui.view.curses.has_colors", return_value=False):
        yield TUIView(stdscr)


@pytest.mark.parametrize("code,name", [
    (curses.KEY_DOWN, "down"),
    (curses.KEY_UP, "up"),
    (curses.KEY_NPAGE, "pgdown"),
    (curses.KEY_PPAGE, "pgup"),
    (10, "enter"),
    (ord("j"), "j"),
    (ord("q"), "q"),
])
def test_translate_key(code, name):
    assert translate_key(code) == name


def test_unnamed_key_is_dropped():
    assert translate_key(curses.KEY_F1) is None


def test_size_is_width_then_height(view):
    assert view.size() == (30, 6)


def test_poll_input_returns_key_events(view, stdscr):
    stdscr.getch.return_value = ord("k")
    assert view.poll_input(50) == KeyPress("k")
    stdscr.timeout.assert_called_with(50)


def test_poll_input_timeout(view, stdscr):
    stdscr.getch.return_value = -1
    assert view.poll_input(50) is None


def test_poll_input_resize(view, stdscr):
    stdscr.getch.return_value = curses.KEY_RESIZE
    stdscr.getmaxyx.return_value = (40, 120)
    with patch("gomodup.tui.view.curses.update_lines_cols"):
        assert view.poll_input(50) == Resize(120, 40)


def test_interrupt_reaches_the_loop(view, stdscr):
    stdscr.getch.side_effect = KeyboardInterrupt
    with pytest.raises(KeyboardInterrupt):
        view.poll_input(50)


def test_draw_clips_to_screen(view, stdscr):
    frame = render(make_state(make_modules(10), cursor=0, height=8))

    view.draw(frame)

    stdscr.erase.assert_called_once()
    stdscr.refresh.assert_called_once()
    rows = {call.args[0] for call in stdscr.addnstr.call_args_list}
    assert rows == set(range(6))
    for call in stdscr.addnstr.call_args_list:
        y, x, text, limit, attr = call.args
        assert x + limit == 30


def test_draw_survives_corner_write(view, stdscr):
    stdscr.addnstr.side_effect = curses.error
    view.draw(render(make_state(make_modules(2), height=2)))
    stdscr.refresh.assert_called_once()
