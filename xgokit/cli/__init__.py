"""
xgokit CLI module.

This module provides the command-line interface for xgokit.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
