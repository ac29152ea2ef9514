"""
Harness settings.

This module defines the settings object that controls logging output and the
initial expression-validation toggles of every MockProcessContext.
"""

from dataclasses import dataclass
from typing import Dict, Any
from enum import Enum

from flowharness.core.exceptions import ConfigurationError


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class HarnessSettings:
    """
    Settings shared by harness instances.

    expression_validation and validate_expression_usage together decide
    whether resolved property values carry their descriptor, which is what
    lets PropertyValue check expression-language support.
    """
    log_level: LogLevel = LogLevel.INFO
    json_logs: bool = False
    expression_validation: bool = False
    validate_expression_usage: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            'log_level': self.log_level.value,
            'json_logs': self.json_logs,
            'expression_validation': self.expression_validation,
            'validate_expression_usage': self.validate_expression_usage
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HarnessSettings':
        """Create settings from dictionary, filling omitted keys with defaults."""
        defaults = cls()
        raw_level = data.get('log_level', defaults.log_level.value)
        try:
            log_level = LogLevel(str(raw_level).upper())
        except ValueError:
            raise ConfigurationError('log_level', str(raw_level), "unknown log level")

        return cls(
            log_level=log_level,
            json_logs=data.get('json_logs', defaults.json_logs),
            expression_validation=data.get('expression_validation', defaults.expression_validation),
            validate_expression_usage=data.get('validate_expression_usage', defaults.validate_expression_usage)
        )
