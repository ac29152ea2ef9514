"""
Core exceptions for the flowharness package.

This module provides all exception classes used throughout the harness,
organized with a clear inheritance hierarchy.
"""

# Base exceptions
from .base import (
    HarnessError,
    ConfigurationError,
    StateError,
    NotFoundError
)

# Harness exceptions
from .harness import (
    UnknownServiceError,
    UnknownPropertyError,
    ExpressionUsageError
)

__all__ = [
    # Base exceptions
    'HarnessError',
    'ConfigurationError',
    'StateError',
    'NotFoundError',

    # Harness exceptions
    'UnknownServiceError',
    'UnknownPropertyError',
    'ExpressionUsageError'
]
