#!/usr/bin/env python3
"""
Setup script for gomodup.

This file exists for backward compatibility with tools that expect setup.py.
All package metadata is defined in pyproject.toml (PEP 621).
"""

from setuptools import setup

# All configuration is in pyproject.toml
setup()
