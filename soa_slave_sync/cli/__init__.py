"""
Command-line interface components.

This package contains CLI tools and entry points for the slave zone sync.
"""

from .main import main

__all__ = ["main"]
