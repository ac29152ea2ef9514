"""
Harness settings domain.
"""

from .config import HarnessSettings, LogLevel
from .schema import HARNESS_SCHEMA, validate_harness_config, get_harness_schema

__all__ = [
    'HarnessSettings',
    'LogLevel',
    'HARNESS_SCHEMA',
    'validate_harness_config',
    'get_harness_schema'
]
