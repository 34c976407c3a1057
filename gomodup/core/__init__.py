"""
Core module for gomodup - contains domain models, configuration, and exceptions.
"""

from .models import (
    Module,
    ModuleUpdate,
    sort_modules,
    updatable_modules,
)

from .exceptions import (
    GoModUpError,
    ConfigurationError,
    SourceError,
    CommandError,
    ModuleDataError,
)

from .config import AppConfig, load_config

__all__ = [
    # Models
    'Module',
    'ModuleUpdate',
    'sort_modules',
    'updatable_modules',
    # Configuration
    'AppConfig',
    'load_config',
    # Exceptions
    'GoModUpError',
    'ConfigurationError',
    'SourceError',
    'CommandError',
    'ModuleDataError',
]
