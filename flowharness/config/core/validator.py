"""
Configuration validation framework.

This module provides schema checks for raw configuration mappings
before they are turned into settings objects.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional


class SchemaViolation:
    """A single problem found in a configuration mapping."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        self.message = message
        self.field = field
        self.value = value

    def __repr__(self):
        return f"SchemaViolation({self.message!r})"


class SchemaReport:
    """Outcome of checking a configuration mapping."""

    def __init__(self, is_valid: bool = True, errors: Optional[List[SchemaViolation]] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: SchemaViolation):
        """Add a schema violation."""
        self.errors.append(error)
        self.is_valid = False

    def __bool__(self):
        return self.is_valid


class ConfigValidator(ABC):
    """Abstract base class for configuration validators."""

    def __init__(self, domain: str):
        self.domain = domain

    @abstractmethod
    def validate(self, config: Dict[str, Any]) -> SchemaReport:
        """Validate configuration data."""
        pass


class SchemaValidator(ConfigValidator):
    """
    Schema-based configuration validator.

    The schema maps keys to a type, a tuple of types, or a nested schema dict.
    Keys absent from the config are allowed (defaults apply); unknown keys are not.
    """

    def __init__(self, domain: str, schema: Dict[str, Any]):
        super().__init__(domain)
        self.schema = schema

    def validate(self, config: Dict[str, Any]) -> SchemaReport:
        """Validate configuration against schema."""
        result = SchemaReport()
        self._validate_dict(config, self.schema, result)
        return result

    def _validate_dict(self, config: Dict[str, Any], schema: Dict[str, Any], result: SchemaReport, path: str = ""):
        """Recursively validate dictionary against schema."""
        for key in config:
            if key not in schema:
                full_path = f"{path}.{key}" if path else key
                result.add_error(SchemaViolation(f"Unknown field: {full_path}", field=key))

        for key, expected_type in schema.items():
            if key not in config:
                continue

            full_path = f"{path}.{key}" if path else key
            value = config[key]

            if isinstance(expected_type, dict):
                if isinstance(value, dict):
                    self._validate_dict(value, expected_type, result, full_path)
                else:
                    result.add_error(SchemaViolation(
                        f"Field {full_path} must be a dictionary, got {type(value).__name__}",
                        field=key, value=value
                    ))
            elif not isinstance(value, expected_type):
                names = (
                    " or ".join(t.__name__ for t in expected_type)
                    if isinstance(expected_type, tuple) else expected_type.__name__
                )
                result.add_error(SchemaViolation(
                    f"Field {full_path} must be of type {names}, got {type(value).__name__}",
                    field=key, value=value
                ))
