"""
Component-side types: what a hosted component declares and receives.
"""

from .result import ValidationResult
from .descriptor import PropertyDescriptor, Relationship, Validator
from .capabilities import (
    ConfigurableComponent, RoutingComponent, ControllerService, is_routing_component
)
from .property_value import PropertyValue

__all__ = [
    'ValidationResult',
    'PropertyDescriptor',
    'Relationship',
    'Validator',
    'ConfigurableComponent',
    'RoutingComponent',
    'ControllerService',
    'is_routing_component',
    'PropertyValue'
]
