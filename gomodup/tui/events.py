"""
Events consumed by the controller and the tasks it emits.

The event set is closed: the controller has exactly one handler per class
defined here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from gomodup.core.models import Module


class Event:
    """Base class for everything placed on the event queue."""
    __slots__ = ()


@dataclass(frozen=True)
class Resize(Event):
    width: int
    height: int


@dataclass(frozen=True)
class KeyPress(Event):
    key: str


@dataclass(frozen=True)
class SpinnerTick(Event):
    pass


@dataclass(frozen=True)
class LoadResult(Event):
    """Outcome of the initial module listing."""
    modules: Optional[Tuple[Module, ...]] = None
    error: Optional[BaseException] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class UpdateResult(Event):
    """Outcome of ``go get`` followed by a fresh listing."""
    modules: Optional[Tuple[Module, ...]] = None
    error: Optional[BaseException] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class Task:
    """
    Background work plus the event that reports its outcome.

    ``work`` runs off the loop thread; ``complete`` is called with either
    ``modules=`` or ``error=`` to build the single result event.
    """
    description: str
    work: Callable[[], Tuple[Module, ...]]
    complete: Callable[..., Event]

    def run(self) -> Event:
        try:
            modules = tuple(self.work())
        except Exception as e:
            return self.complete(error=e)
        return self.complete(modules=modules)
