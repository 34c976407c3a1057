#!/usr/bin/env python3
"""
TUI state values - the module list, its cursor, and the scrolling viewport.

Every value here is immutable. The controller produces a new state for each
event instead of mutating the previous one.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple

from gomodup.core.models import Module

from .spinner import Spinner


def clamp_cursor(cursor: Optional[int], length: int) -> Optional[int]:
    """Wrap a cursor into ``[0, length-1]``; None when there is nothing to select."""
    if length <= 0:
        return None
    return (cursor or 0) % length


@dataclass(frozen=True)
class ListModel:
    """The ordered list of updatable modules plus the cursor into it."""
    modules: Optional[Tuple[Module, ...]] = None
    cursor: Optional[int] = None

    @property
    def loaded(self) -> bool:
        """False until the first listing has arrived."""
        return self.modules is not None

    def __len__(self) -> int:
        return len(self.modules) if self.modules else 0

    @property
    def selected(self) -> Optional[Module]:
        if self.cursor is None or not self.modules:
            return None
        return self.modules[self.cursor]

    def clamp_cursor(self) -> Optional[int]:
        return clamp_cursor(self.cursor, len(self))

    def with_cursor(self, cursor: Optional[int]) -> ListModel:
        return replace(self, cursor=clamp_cursor(cursor, len(self)))

    def move(self, delta: int) -> ListModel:
        """Move the cursor with wraparound at both ends."""
        if self.cursor is None or len(self) == 0:
            return self
        return self.with_cursor(self.cursor + delta)

    def replace(self, modules: Sequence[Module]) -> ListModel:
        """Swap in a freshly loaded list, keeping the cursor where possible."""
        modules = tuple(modules)
        return ListModel(modules=modules, cursor=clamp_cursor(self.cursor, len(modules)))


@dataclass(frozen=True)
class Viewport:
    """A window of ``height`` lines starting at ``top_offset``."""
    height: int = 0
    width: int = 0
    top_offset: int = 0

    @property
    def bottom(self) -> int:
        """Index of the last visible line."""
        return self.top_offset + self.height - 1

    def max_offset(self, content_length: int) -> int:
        return max(0, content_length - self.height)

    def resize(self, width: int, height: int) -> Viewport:
        return replace(self, width=width, height=height)

    def scroll_by(self, delta: int, content_length: int) -> Viewport:
        """Scroll, never past the start nor leaving fewer than ``height`` lines visible."""
        offset = min(self.top_offset + delta, self.max_offset(content_length))
        return replace(self, top_offset=max(0, offset))

    def reconcile_after_cursor_move(self, cursor: Optional[int]) -> Viewport:
        """Move the window so that the cursor line is visible."""
        if cursor is None:
            return self
        if cursor < self.top_offset:
            return replace(self, top_offset=cursor)
        if cursor > self.bottom:
            return replace(self, top_offset=cursor - self.height + 1)
        return self

    def reconcile_after_scroll(self, cursor: Optional[int]) -> Optional[int]:
        """Return the cursor pulled to the nearest edge of the window."""
        if cursor is None:
            return None
        if cursor < self.top_offset:
            return self.top_offset
        if cursor > self.bottom:
            return self.bottom
        return cursor

    def window(self, lines: Sequence) -> list:
        return list(lines[self.top_offset:self.top_offset + self.height])


@dataclass(frozen=True)
class SessionState:
    """Everything the controller knows about the session."""
    ready: bool = False
    modules: ListModel = field(default_factory=ListModel)
    viewport: Viewport = field(default_factory=Viewport)
    busy: bool = False
    error: Optional[BaseException] = None
    spinner: Spinner = field(default_factory=Spinner)
    quitting: bool = False
