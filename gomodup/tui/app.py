#!/usr/bin/env python3
"""
TUI Application - The single-threaded event loop.

Keyboard input, resize notifications, spinner ticks and task results all
arrive on one queue and are applied to the session state strictly in
arrival order. The screen is redrawn after every event until the controller
asks to quit.
"""

from __future__ import annotations

import logging
import queue
from typing import Optional

from .controller import Controller, render
from .events import Event, KeyPress, Resize, Task
from .services import TaskRunner, Ticker
from .state import SessionState


class TUIApp:
    """Coordinates the view, the controller and the background services."""

    def __init__(self, view, controller: Controller, tick_interval: float = 0.1,
                 poll_ms: int = 50, logger: Optional[logging.Logger] = None):
        self.view = view
        self.controller = controller
        self.poll_ms = poll_ms
        self.logger = logger or logging.getLogger(__name__)

        self.events: queue.Queue = queue.Queue()
        self.runner = TaskRunner(self.events)
        self.ticker = Ticker(self.events, tick_interval)

        self.render_count = 0

    def run(self) -> SessionState:
        """
        Run until the user quits or a task fails.

        Returns:
            The final session state; ``error`` is set when the session failed.
        """
        self.logger.info("Session started")
        state = self.controller.initial_state()

        self.events.put(Resize(*self.view.size()))
        self._submit(self.controller.load_task())
        self.ticker.start()

        try:
            while not state.quitting:
                try:
                    event = self._next_event()
                    if event is not None:
                        state = self.step(state, event)
                except KeyboardInterrupt:
                    # SIGINT in cbreak mode quits like the ctrl+c key
                    self.logger.info("Keyboard interrupt - shutting down...")
                    state = self.step(state, KeyPress("ctrl+c"))
        finally:
            self.ticker.stop()

        if self.runner.is_busy():
            self.logger.warning(f"Leaving with tasks still running: {self.runner.get_current_operations()}")
        self.logger.info(f"Session ended after {self.render_count} renders")
        return state

    def step(self, state: SessionState, event: Event) -> SessionState:
        """Apply one event, start its follow-up task and redraw."""
        state, task = self.controller.update(state, event)
        if task is not None:
            self._submit(task)
        if not state.quitting:
            self.view.draw(render(state))
            self.render_count += 1
        return state

    def _submit(self, task: Task) -> None:
        self.logger.debug(f"Submitting task: {task.description}")
        self.runner.submit(task)

    def _next_event(self) -> Optional[Event]:
        """Take the oldest queued event, reading the keyboard when the queue is empty."""
        try:
            return self.events.get_nowait()
        except queue.Empty:
            pass

        event = self.view.poll_input(self.poll_ms)
        if event is not None:
            self.events.put(event)
        try:
            return self.events.get_nowait()
        except queue.Empty:
            return None
