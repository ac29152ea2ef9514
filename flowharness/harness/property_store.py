"""
Property store for a hosted component.

The store maps descriptors to explicitly configured values. Descriptors are
keyed by name, and every operation first resolves the caller's descriptor (or
plain name) to the component's own, fully populated descriptor.

Invariants:
    - a key present in the mapping holds a non-None value, as last written
    - absence of a key means the descriptor default is in effect
    - writes are committed even when the value fails validation
"""

from typing import Dict, Mapping, Optional, Union

from flowharness.component.descriptor import PropertyDescriptor
from flowharness.component.property_value import PropertyValue
from flowharness.component.result import ValidationResult
from flowharness.core.exceptions import UnknownPropertyError
from flowharness.logger import get_harness_logger

DescriptorRef = Union[PropertyDescriptor, str]


def descriptor_name(ref: DescriptorRef) -> str:
    """Name of a descriptor reference, which may be a descriptor or a bare name."""
    if isinstance(ref, PropertyDescriptor):
        return ref.name
    if isinstance(ref, str):
        return ref
    raise TypeError(f"expected a PropertyDescriptor or a property name, got {type(ref).__name__}")


class PropertyStore:
    """
    Configured property values of one component.

    Parameters
    ----------
    component : ConfigurableComponent
        Supplies the descriptor catalog and receives change notifications.
    service_lookup : ControllerServiceRegistry, optional
        Handed to every PropertyValue so that values naming a controller
        service can be resolved.
    """

    def __init__(self, component, service_lookup=None):
        self.component = component
        self.service_lookup = service_lookup
        self._values: Dict[PropertyDescriptor, str] = {}
        self.logger = get_harness_logger().bind(
            component="PropertyStore", owner=type(component).__name__
        )

    def resolve(self, ref: DescriptorRef) -> Optional[PropertyDescriptor]:
        """Return the component's descriptor for ref, or None if it is unknown."""
        return self.component.get_property_descriptor(descriptor_name(ref))

    def get(self, ref: DescriptorRef, attach_descriptor: bool = False) -> Optional[PropertyValue]:
        """
        Resolve the effective value of a property.

        Returns None when the component does not know the property. The
        descriptor is attached to the returned value only if attach_descriptor.
        """
        descriptor = self.resolve(ref)
        if descriptor is None:
            return None

        configured = self._values.get(descriptor)
        effective = descriptor.default_value if configured is None else configured
        return PropertyValue(effective, self.service_lookup, descriptor if attach_descriptor else None)

    def set(self, ref: DescriptorRef, value: str, validation_context=None) -> ValidationResult:
        """
        Validate and store a property value.

        The value is stored whatever the validation outcome; the returned
        result only reports it. The component is notified when the effective
        value changes.

        Raises:
            ValueError: if value is None (use remove instead)
            UnknownPropertyError: if the component does not declare the property
        """
        if value is None:
            raise ValueError(
                "Cannot set property to None; to remove the property, call remove instead"
            )

        descriptor = self.resolve(ref)
        if descriptor is None:
            raise UnknownPropertyError(descriptor_name(ref), type(self.component).__name__)

        result = descriptor.validate(value, validation_context)

        old_value = self._values.get(descriptor)
        self._values[descriptor] = value
        if old_value is None:
            old_value = descriptor.default_value

        self.logger.debug(
            "Property set", property=descriptor.name, valid=result.valid,
            changed=value != old_value
        )
        if value != old_value:
            self.component.on_property_modified(descriptor, old_value, value)

        return result

    def remove(self, ref: DescriptorRef) -> bool:
        """
        Remove an explicitly configured value.

        Returns True if a value was configured. The component is notified
        only when the removed value differed from the default.
        """
        descriptor = self.resolve(ref)
        if descriptor is None:
            # Seeded entries may name properties the component does not declare
            descriptor = ref if isinstance(ref, PropertyDescriptor) else PropertyDescriptor(ref)

        value = self._values.pop(descriptor, None)
        if value is None:
            return False

        self.logger.debug("Property removed", property=descriptor.name)
        if value != descriptor.default_value:
            self.component.on_property_modified(descriptor, value, None)
        return True

    def snapshot(self) -> Dict[PropertyDescriptor, Optional[str]]:
        """
        All properties of the component with their configured values.

        With a declared catalog, every declared descriptor appears (None when
        unset; defaults are not substituted). Without one, only explicitly
        configured properties appear.
        """
        supported = self.component.get_property_descriptors()
        if not supported:
            return dict(self._values)

        props: Dict[PropertyDescriptor, Optional[str]] = {descriptor: None for descriptor in supported}
        props.update(self._values)
        return props

    def configured(self) -> Dict[PropertyDescriptor, str]:
        """Copy of the explicitly configured values only."""
        return dict(self._values)

    def seed(self, properties: Mapping[DescriptorRef, Optional[str]]):
        """
        Bulk-populate values without validation or change notification.

        None values are skipped so that absence keeps meaning "use default".
        """
        for ref, value in properties.items():
            if value is None:
                continue
            descriptor = self.resolve(ref)
            if descriptor is None:
                descriptor = ref if isinstance(ref, PropertyDescriptor) else PropertyDescriptor(ref)
            self._values[descriptor] = value

    def clear(self):
        """Drop every configured value without notification."""
        self._values.clear()

    def __contains__(self, ref: DescriptorRef) -> bool:
        return PropertyDescriptor(descriptor_name(ref)) in self._values

    def __len__(self):
        return len(self._values)
