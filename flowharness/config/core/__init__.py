"""
Core configuration management components.

- ConfigProvider: Abstract provider interface and implementations
- ConfigValidator: Schema checks for raw configuration data
"""

from .provider import ConfigProvider, FileConfigProvider, RuntimeConfigProvider
from .validator import ConfigValidator, SchemaValidator, SchemaReport, SchemaViolation

__all__ = [
    # Providers
    'ConfigProvider',
    'FileConfigProvider',
    'RuntimeConfigProvider',

    # Validators
    'ConfigValidator',
    'SchemaValidator',
    'SchemaReport',
    'SchemaViolation'
]
