"""
Go module dependency source.
"""

from .source import GoModuleSource, iter_json_values, parse_module_listing

__all__ = ['GoModuleSource', 'iter_json_values', 'parse_module_listing']
