"""Busy indicator animation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Tuple


SPINNERS: Dict[str, Tuple[str, ...]] = {
    "line": ("|", "/", "-", "\\"),
    "dot": ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷"),
}


@dataclass(frozen=True)
class Spinner:
    """A cyclic sequence of frames advanced by tick events."""
    frames: Tuple[str, ...] = SPINNERS["line"]
    frame: int = 0

    @classmethod
    def named(cls, style: str) -> Spinner:
        return cls(frames=SPINNERS[style])

    def advance(self) -> Spinner:
        return replace(self, frame=(self.frame + 1) % len(self.frames))

    def view(self) -> str:
        return self.frames[self.frame]
