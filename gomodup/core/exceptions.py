"""
Exception classes for gomodup.
"""

from typing import Optional, Sequence


class GoModUpError(Exception):
    """Base exception for all gomodup errors."""
    pass


class ConfigurationError(GoModUpError):
    """Raised when configuration is invalid or unreadable."""
    pass


class SourceError(GoModUpError):
    """Base exception for dependency source failures."""
    pass


class CommandError(SourceError):
    """Raised when an external go command cannot be started or exits non-zero."""

    def __init__(self, message: str, args: Sequence[str] = (), returncode: Optional[int] = None):
        super().__init__(message)
        self.command = list(args)
        self.returncode = returncode


class ModuleDataError(SourceError):
    """Raised when the module listing cannot be decoded."""
    pass
