#!/usr/bin/env python3
"""
Global pytest configuration and fixtures.

This module provides:
- Module factories for building dependency listings
- A fake dependency source that never runs the go tool
- Session state helpers for controller tests
"""

import os
import shutil
import sys
import tempfile
import threading
from typing import Generator, List, Optional, Sequence

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gomodup.core.models import Module, ModuleUpdate
from gomodup.tui.controller import Controller
from gomodup.tui.state import ListModel, SessionState, Viewport


def make_module(path: str, indirect: bool = False, version: str = "v1.0.0",
                latest: Optional[str] = "v1.1.0", main: bool = False) -> Module:
    """Build a module record; ``latest=None`` means no update is available."""
    update = ModuleUpdate(path=path, version=latest) if latest else None
    return Module(path=path, version=version, update=update, main=main, indirect=indirect)


def make_modules(count: int, prefix: str = "example.com/mod") -> List[Module]:
    return [make_module(f"{prefix}{i:02d}") for i in range(count)]


def make_state(modules: Sequence[Module] = (), cursor: Optional[int] = 0, height: int = 10,
               top_offset: int = 0, busy: bool = False) -> SessionState:
    """A ready session showing ``modules``."""
    modules = tuple(modules)
    return SessionState(
        ready=True,
        modules=ListModel(modules=modules, cursor=cursor if modules else None),
        viewport=Viewport(height=height, width=80, top_offset=top_offset),
        busy=busy,
    )


class FakeSource:
    """Dependency source that serves canned listings."""

    def __init__(self, modules: Sequence[Module] = (), load_error: Optional[Exception] = None,
                 update_error: Optional[Exception] = None):
        self.modules = list(modules)
        self.load_error = load_error
        self.update_error = update_error
        self.updated: List[Module] = []
        self.load_calls = 0
        self._lock = threading.Lock()

    def load(self):
        with self._lock:
            self.load_calls += 1
            if self.load_error is not None:
                raise self.load_error
            return tuple(self.modules)

    def apply_update(self, module: Module):
        with self._lock:
            if self.update_error is not None:
                raise self.update_error
            self.updated.append(module)
            self.modules = [m for m in self.modules if m.path != module.path]
        return self.load()


@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = tempfile.mkdtemp(prefix="gomodup_test_")
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def fake_source() -> FakeSource:
    return FakeSource(make_modules(5))


@pytest.fixture
def controller(fake_source) -> Controller:
    return Controller(fake_source)
