"""
Base exception classes for the flowharness package.
"""


class HarnessError(Exception):
    """Base exception for all flowharness errors."""
    pass


class ConfigurationError(HarnessError):
    """Raised when the harness or its settings cannot be built."""

    def __init__(self, config_key: str = None, config_value: str = None, reason: str = None):
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
        message = "Configuration error"
        if config_key:
            message += f" for '{config_key}'"
        if config_value:
            message += f" with value '{config_value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class StateError(HarnessError):
    """Base exception for operations attempted in the wrong state."""

    def __init__(self, entity_id: str, current_state: str, required_state: str = None, operation: str = None):
        self.entity_id = entity_id
        self.current_state = current_state
        self.required_state = required_state
        self.operation = operation

        message = f"Entity '{entity_id}' is in state '{current_state}'"
        if operation:
            message += f" but operation '{operation}' is not allowed"
        if required_state:
            message += f" (requires state '{required_state}')"
        super().__init__(message)


class NotFoundError(HarnessError, LookupError):
    """Base exception for entity not found errors."""

    def __init__(self, entity_type: str, identifier: str = None):
        self.entity_type = entity_type
        self.identifier = identifier
        message = f"{entity_type} not found"
        if identifier:
            message += f" with identifier '{identifier}'"
        super().__init__(message)
