"""
gomodup - Interactive updater for outdated Go module dependencies.
"""

__version__ = "0.1.0"
