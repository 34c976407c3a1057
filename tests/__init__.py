"""
Test suite for gomodup.

This package contains:
- Unit tests for the models, state values and controller
- Tests for the go command adapter with mocked subprocesses
- Event loop tests driven by a scripted display surface
"""
