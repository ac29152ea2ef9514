"""
Configuration management for the harness.

This module provides:
- Harness settings and their schema
- File (YAML) and in-memory providers
- load_settings, for callers that keep settings in a file
"""

from .core import (
    ConfigProvider, FileConfigProvider, RuntimeConfigProvider,
    ConfigValidator, SchemaValidator, SchemaReport, SchemaViolation
)

from .harness import (
    HarnessSettings, LogLevel,
    HARNESS_SCHEMA, validate_harness_config, get_harness_schema
)

SETTINGS_DOMAIN = "flowharness"


def load_settings(config_dir: str = ".", provider: ConfigProvider = None) -> HarnessSettings:
    """
    Load harness settings.

    Reads `<config_dir>/flowharness.yaml` unless a provider is given. A missing
    file yields the defaults.
    """
    if provider is None:
        provider = FileConfigProvider(SETTINGS_DOMAIN, config_dir)
    raw = provider.get_config()
    validate_harness_config(raw)
    return HarnessSettings.from_dict(raw)


__all__ = [
    # Core infrastructure
    'ConfigProvider',
    'FileConfigProvider',
    'RuntimeConfigProvider',
    'ConfigValidator',
    'SchemaValidator',
    'SchemaReport',
    'SchemaViolation',

    # Harness domain
    'HarnessSettings',
    'LogLevel',
    'HARNESS_SCHEMA',
    'validate_harness_config',
    'get_harness_schema',

    # Convenience functions
    'SETTINGS_DOMAIN',
    'load_settings'
]
