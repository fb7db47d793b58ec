"""
Core functionality for xgokit.

This package contains the exception hierarchy and the process runner that
the other components depend on.
"""

from .exceptions import (
    XgoError,
    StageError,
    InvalidArguments,
    ConfigurationError,
    RuntimeUnavailable,
    ImageQueryFailed,
    ImagePullFailed,
    CompilationFailed,
)
from . import process

__all__ = [
    "XgoError",
    "StageError",
    "InvalidArguments",
    "ConfigurationError",
    "RuntimeUnavailable",
    "ImageQueryFailed",
    "ImagePullFailed",
    "CompilationFailed",
    "process",
]
