"""
Harness settings schema definitions.
"""

from typing import Dict, Any

from flowharness.core.exceptions import ConfigurationError
from ..core.validator import SchemaValidator

HARNESS_SCHEMA = {
    'log_level': str,
    'json_logs': bool,
    'expression_validation': bool,
    'validate_expression_usage': bool
}


def validate_harness_config(config: Dict[str, Any]) -> bool:
    """
    Validate raw harness settings.

    Args:
        config: Configuration dictionary to validate

    Returns:
        True if valid

    Raises:
        ConfigurationError: listing every schema violation found
    """
    report = SchemaValidator('flowharness', HARNESS_SCHEMA).validate(config)
    if not report:
        reasons = "; ".join(error.message for error in report.errors)
        raise ConfigurationError('flowharness', reason=reasons)
    return True


def get_harness_schema() -> Dict[str, Any]:
    """Get the harness settings schema."""
    return HARNESS_SCHEMA.copy()
