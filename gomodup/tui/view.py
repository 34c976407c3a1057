#!/usr/bin/env python3
"""
TUI View Module - Handles all curses drawing and keyboard input.

The view paints Frames produced by the controller and turns raw curses key
codes into KeyPress and Resize events. It holds no session state.
"""

from __future__ import annotations

import curses
from typing import Dict, Optional, Tuple

from .controller import STYLE_CURSOR, STYLE_NORMAL, STYLE_SPINNER, Frame
from .events import Event, KeyPress, Resize


SPECIAL_KEYS: Dict[int, str] = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_PPAGE: "pgup",
    curses.KEY_NPAGE: "pgdown",
    curses.KEY_ENTER: "enter",
    10: "enter",
    13: "enter",
}

_CURSOR_PAIR = 1
_SPINNER_PAIR = 2


def translate_key(ch: int) -> Optional[str]:
    """Map a curses key code to a key name; None for keys without a name."""
    if ch in SPECIAL_KEYS:
        return SPECIAL_KEYS[ch]
    if 32 <= ch < 127:
        return chr(ch)
    return None


class TUIView:
    """Handles all visual presentation and curses rendering for the TUI."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor
        self.stdscr.keypad(True)
        self._styles = {
            STYLE_NORMAL: curses.A_NORMAL,
            STYLE_CURSOR: curses.A_BOLD,
            STYLE_SPINNER: curses.A_NORMAL,
        }
        self._init_colors()

    def _init_colors(self):
        if not curses.has_colors():
            return
        curses.start_color()
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK
        curses.init_pair(_CURSOR_PAIR, curses.COLOR_RED, background)
        curses.init_pair(_SPINNER_PAIR, curses.COLOR_GREEN, background)
        self._styles[STYLE_CURSOR] = curses.color_pair(_CURSOR_PAIR) | curses.A_BOLD
        self._styles[STYLE_SPINNER] = curses.color_pair(_SPINNER_PAIR)

    def size(self) -> Tuple[int, int]:
        """Terminal size as (width, height)."""
        height, width = self.stdscr.getmaxyx()
        return width, height

    def poll_input(self, timeout_ms: int) -> Optional[Event]:
        """
        Wait up to ``timeout_ms`` for a key.

        Returns:
            KeyPress or Resize event, or None on timeout and unnamed keys
        """
        self.stdscr.timeout(timeout_ms)
        ch = self.stdscr.getch()

        if ch == -1:
            return None
        if ch == curses.KEY_RESIZE:
            curses.update_lines_cols()
            return Resize(*self.size())

        key = translate_key(ch)
        return KeyPress(key) if key is not None else None

    def draw(self, frame: Frame):
        """Paint a frame, clipping to the terminal size."""
        height, width = self.stdscr.getmaxyx()
        self.stdscr.erase()
        for y, line in enumerate(frame.lines()):
            if y >= height:
                break
            x = 0
            for segment in line:
                if x >= width:
                    break
                try:
                    self.stdscr.addnstr(y, x, segment.text, width - x, self._styles[segment.style])
                except curses.error:
                    pass  # writing the bottom-right cell raises after drawing
                x += len(segment.text)
        self.stdscr.refresh()
