"""
Core module for the flowharness package.

This module provides the foundational components used throughout the harness:
- Exception classes organized by concern
"""

from .exceptions import *

from .exceptions import __all__ as exceptions_all

__all__ = []
__all__.extend(exceptions_all)
