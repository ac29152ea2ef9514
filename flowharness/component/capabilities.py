"""
Capability protocols a component must satisfy to be hosted by the harness.

Conformance is structural (@runtime_checkable): a component never has to
inherit from anything here. Optional capabilities, such as declaring
relationships, are detected with isinstance checks against these protocols.
"""

from typing import Protocol, runtime_checkable, Any, Iterable, List, Optional, Set

from .descriptor import PropertyDescriptor, Relationship
from .result import ValidationResult


@runtime_checkable
class ConfigurableComponent(Protocol):
    """Minimum contract of a property-driven component."""

    def get_property_descriptor(self, name: str) -> Optional[PropertyDescriptor]:
        """Return the fully populated descriptor for name, or None if unknown."""
        ...

    def get_property_descriptors(self) -> List[PropertyDescriptor]:
        """Declared descriptors in display order; empty means unconstrained."""
        ...

    def on_property_modified(self, descriptor: PropertyDescriptor, old_value: Optional[str],
                             new_value: Optional[str]) -> None:
        """Called synchronously whenever a property's effective value changes."""
        ...

    def validate(self, context: Any) -> Iterable[ValidationResult]:
        """Validate the component against a read-only ValidationContext."""
        ...


@runtime_checkable
class RoutingComponent(Protocol):
    """A component that routes output to named relationships."""

    def get_relationships(self) -> Set[Relationship]:
        ...


@runtime_checkable
class ControllerService(ConfigurableComponent, Protocol):
    """A configurable component referenced by other components through its identifier."""

    identifier: str


def is_routing_component(component) -> bool:
    """True when the component declares relationships."""
    return isinstance(component, RoutingComponent)
