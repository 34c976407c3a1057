#!/usr/bin/env python3
"""
TUI Controller Module - Turns events into new session states.

The controller never touches the terminal or runs subprocesses itself.
``update`` is a pure ``(state, event) -> (state, task)`` function and
``render`` is a pure ``state -> Frame`` function; the application loop
owns the queue, the worker threads and the screen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from gomodup.core.models import Module

from .events import Event, KeyPress, LoadResult, Resize, SpinnerTick, Task, UpdateResult
from .spinner import Spinner
from .state import SessionState, Viewport


# Header and footer lines are not part of the scrollable list.
RESERVED_LINES = 2

QUIT = "quit"
APPLY_UPDATE = "update"
NEXT = "next"
PREVIOUS = "previous"
SCROLL_UP = "scroll_up"
SCROLL_DOWN = "scroll_down"

KEY_BINDINGS: Dict[str, str] = {
    "q": QUIT,
    "ctrl+c": QUIT,
    "enter": APPLY_UPDATE,
    "down": NEXT,
    "j": NEXT,
    "up": PREVIOUS,
    "k": PREVIOUS,
    "pgup": SCROLL_UP,
    "u": SCROLL_UP,
    "pgdown": SCROLL_DOWN,
    "d": SCROLL_DOWN,
}

STYLE_NORMAL = "normal"
STYLE_CURSOR = "cursor"
STYLE_SPINNER = "spinner"

HELP_TEXT = "(press 'q' to quit)"


class Controller:
    """Reducer for the module update session."""

    def __init__(self, source, spinner: str = "line", logger: Optional[logging.Logger] = None):
        self.source = source
        self.spinner_style = spinner
        self.logger = logger or logging.getLogger(__name__)

        self._handlers = {
            Resize: self._on_resize,
            LoadResult: self._on_load_result,
            UpdateResult: self._on_update_result,
            KeyPress: self._on_key,
            SpinnerTick: self._on_tick,
        }

    def initial_state(self) -> SessionState:
        return SessionState(spinner=Spinner.named(self.spinner_style))

    def load_task(self) -> Task:
        return Task("list modules", self.source.load, LoadResult)

    def update_task(self, module: Module) -> Task:
        return Task(
            f"update {module.target}",
            lambda: self.source.apply_update(module),
            UpdateResult,
        )

    def update(self, state: SessionState, event: Event) -> Tuple[SessionState, Optional[Task]]:
        """
        Apply one event to the session state.

        Returns:
            The new state and at most one task for the loop to run.

        Raises:
            TypeError: If the event type has no handler.
        """
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unhandled event type: {type(event).__name__}")
        return handler(state, event)

    def _on_resize(self, state: SessionState, event: Resize):
        height = max(1, event.height - RESERVED_LINES)
        if not state.ready:
            viewport = Viewport(height=height, width=event.width)
            return replace(state, ready=True, viewport=viewport), None

        viewport = state.viewport.resize(event.width, height).scroll_by(0, len(state.modules))
        cursor = viewport.reconcile_after_scroll(state.modules.cursor)
        return replace(state, viewport=viewport, modules=state.modules.with_cursor(cursor)), None

    def _fail(self, state: SessionState, error: BaseException):
        self.logger.error(f"Session failed: {error}")
        return replace(state, error=error, quitting=True), None

    def _with_modules(self, state: SessionState, modules) -> SessionState:
        listing = state.modules.replace(modules)
        viewport = state.viewport.scroll_by(0, len(listing)).reconcile_after_cursor_move(listing.cursor)
        return replace(state, modules=listing, viewport=viewport)

    def _on_load_result(self, state: SessionState, event: LoadResult):
        if event.failed:
            return self._fail(state, event.error)
        return self._with_modules(state, event.modules), None

    def _on_update_result(self, state: SessionState, event: UpdateResult):
        if event.failed:
            return self._fail(state, event.error)
        self.logger.info(f"Update finished, {len(event.modules)} modules still outdated")
        return replace(self._with_modules(state, event.modules), busy=False), None

    def _on_tick(self, state: SessionState, event: SpinnerTick):
        return replace(state, spinner=state.spinner.advance()), None

    def _on_key(self, state: SessionState, event: KeyPress):
        action = KEY_BINDINGS.get(event.key)
        if action is None:
            return state, None

        if action == QUIT:
            return replace(state, quitting=True), None

        # Navigation is blocked during an update as well.
        if state.busy:
            return state, None

        if action == APPLY_UPDATE:
            module = state.modules.selected
            if module is None:
                return state, None
            self.logger.debug(f"Requesting update of {module.target}")
            return replace(state, busy=True), self.update_task(module)

        if action in (NEXT, PREVIOUS):
            listing = state.modules.move(1 if action == NEXT else -1)
            viewport = state.viewport.reconcile_after_cursor_move(listing.cursor)
            return replace(state, modules=listing, viewport=viewport), None

        viewport = state.viewport.scroll_by(1 if action == SCROLL_DOWN else -1, len(state.modules))
        cursor = viewport.reconcile_after_scroll(state.modules.cursor)
        return replace(state, viewport=viewport, modules=state.modules.with_cursor(cursor)), None


@dataclass(frozen=True)
class Segment:
    """A run of text drawn with a single style."""
    text: str
    style: str = STYLE_NORMAL


Line = Tuple[Segment, ...]


@dataclass(frozen=True)
class Frame:
    """Everything the display surface needs to paint one screen."""
    header: Line
    body: Tuple[Line, ...]
    footer: Line

    def lines(self) -> Tuple[Line, ...]:
        return (self.header,) + self.body + (self.footer,)

    def text(self) -> str:
        return "\n".join("".join(segment.text for segment in line) for line in self.lines())


def module_line(module: Module, marker: Segment) -> Line:
    suffix = " // indirect" if module.indirect else ""
    latest = module.update.version if module.update else ""
    return (marker, Segment(f" {module.path} [{module.version} -> {latest}]{suffix}"))


def render(state: SessionState) -> Frame:
    """Build the screen for a state. Pure and idempotent."""
    footer = (Segment(HELP_TEXT),)
    listing = state.modules

    if not state.ready or not listing.loaded:
        header = (Segment(state.spinner.view(), STYLE_SPINNER), Segment(" Loading..."))
        return Frame(header=header, body=(), footer=footer)

    if len(listing) == 0:
        return Frame(header=(Segment("All modules are up-to-date"),), body=(), footer=footer)

    header = (Segment(f"Press enter to update [{listing.cursor + 1}/{len(listing)}]"),)

    lines = []
    for index, module in enumerate(listing.modules):
        if index != listing.cursor:
            marker = Segment(" ")
        elif state.busy:
            marker = Segment(state.spinner.view(), STYLE_SPINNER)
        else:
            marker = Segment(">", STYLE_CURSOR)
        lines.append(module_line(module, marker))

    body = state.viewport.window(lines)
    body.extend(() for _ in range(state.viewport.height - len(body)))
    return Frame(header=header, body=tuple(body), footer=footer)
