"""
Harness-specific exceptions.
"""

from .base import NotFoundError, StateError


class UnknownServiceError(NotFoundError):
    """Raised when a controller service identifier has not been registered."""

    def __init__(self, identifier: str):
        super().__init__("Controller service", identifier)


class UnknownPropertyError(NotFoundError):
    """Raised when a property is written that the component does not declare."""

    def __init__(self, name: str, component: str = None):
        self.component = component
        entity_type = f"Property descriptor on {component}" if component else "Property descriptor"
        super().__init__(entity_type, name)


class ExpressionUsageError(StateError):
    """Raised when expressions are evaluated on a property that does not support them."""

    def __init__(self, property_name: str):
        self.property_name = property_name
        super().__init__(
            property_name,
            "expression language not supported",
            operation="evaluate_attribute_expressions",
        )
