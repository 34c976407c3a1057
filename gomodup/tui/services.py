#!/usr/bin/env python3
"""
TUI Services Module - Runs background tasks and the animation clock.

Worker threads never touch session state. Each one reports back by putting
a single event on the queue that the application loop drains.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from typing import List, Optional

from .events import SpinnerTick, Task


class TaskRunner:
    """
    Executes tasks on daemon threads and posts their result events.

    The controller's busy flag keeps at most one update in flight; the runner
    only tracks what is running for logging.
    """

    def __init__(self, events: queue.Queue, logger: Optional[logging.Logger] = None):
        self.events = events
        self.logger = logger or logging.getLogger(__name__)
        self._operation_lock = threading.Lock()
        self._running: List[str] = []

    def is_busy(self) -> bool:
        """Check if any task is currently running."""
        with self._operation_lock:
            return bool(self._running)

    def get_current_operations(self) -> List[str]:
        with self._operation_lock:
            return list(self._running)

    def submit(self, task: Task) -> None:
        """Start a task in the background."""
        thread = threading.Thread(target=self._run_task, args=(task,), daemon=True)
        with self._operation_lock:
            self._running.append(task.description)
        thread.start()

    def _run_task(self, task: Task) -> None:
        self.logger.debug(f"Starting task: {task.description}")
        start_time = time.time()
        event = task.run()
        elapsed = time.time() - start_time

        error = getattr(event, "error", None)
        if error is not None:
            self.logger.error(f"Task '{task.description}' failed after {elapsed:.1f}s: {error}")
        else:
            self.logger.info(f"Task '{task.description}' completed after {elapsed:.1f}s")

        with self._operation_lock:
            self._running.remove(task.description)
        self.events.put(event)


class Ticker:
    """Posts a SpinnerTick every ``interval`` seconds until stopped."""

    def __init__(self, events: queue.Queue, interval: float = 0.1):
        self.events = events
        self.interval = interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            self.events.put(SpinnerTick())

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self.interval * 2)
            self._thread = None
