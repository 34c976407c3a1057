#!/usr/bin/env python3
"""
TUI package for gomodup.

Separates the pure controller (state transitions and rendering) from the
curses view and the threaded services that feed the event loop.
"""

from __future__ import annotations

__all__ = ['app', 'controller', 'events', 'services', 'spinner', 'state', 'view']
