"""
Controller service registry.

Keeps the configuration of every controller service a component depends on,
keyed by service identifier. Each entry owns its own PropertyStore, so nested
services are configured with the same semantics as the top-level component.
"""

from typing import Dict, Iterator, List, Mapping, Optional

from flowharness.component.result import ValidationResult
from flowharness.core.exceptions import ConfigurationError, StateError, UnknownServiceError
from flowharness.logger import get_harness_logger
from .property_store import DescriptorRef, PropertyStore


class ControllerServiceConfiguration:
    """Property store, annotation data and enabled flag of one registered service."""

    def __init__(self, identifier: str, service, properties: PropertyStore,
                 annotation_data: Optional[str] = None):
        self.identifier = identifier
        self.service = service
        self.properties = properties
        self.annotation_data = annotation_data
        self.enabled = False

    def get_properties(self):
        return self.properties.configured()

    def __repr__(self):
        state = "enabled" if self.enabled else "disabled"
        return f"ControllerServiceConfiguration({self.identifier!r}, {state})"


class ControllerServiceRegistry:
    """
    Registry of controller service configurations.

    Services are looked up by identifier. An unknown identifier is an error
    (UnknownServiceError) everywhere in the registry.
    """

    def __init__(self):
        self.logger = get_harness_logger().bind(component="ControllerServiceRegistry")
        self._configurations: Dict[str, ControllerServiceConfiguration] = {}

    def register(self, identifier: str, service, properties: Mapping = None,
                 annotation_data: Optional[str] = None) -> ControllerServiceConfiguration:
        """
        Register a service, replacing any previous entry for the identifier.

        Args:
            identifier: Service identifier other components refer to
            service: The controller service component
            properties: Initial property values, stored without validation
            annotation_data: Opaque configuration blob for the service

        Returns:
            The new configuration entry
        """
        if service is None:
            raise ConfigurationError("controller_service", identifier, "a service instance is required")
        if not isinstance(identifier, str) or not identifier.strip():
            raise ConfigurationError("identifier", reason="must be a non-empty string")

        store = PropertyStore(service, service_lookup=self)
        store.seed(properties or {})
        configuration = ControllerServiceConfiguration(identifier, service, store, annotation_data)

        replaced = identifier in self._configurations
        self._configurations[identifier] = configuration
        self.logger.info(
            "Controller service registered", identifier=identifier,
            service_type=type(service).__name__, replaced=replaced
        )
        return configuration

    def deregister(self, identifier: str) -> ControllerServiceConfiguration:
        """Remove a service and return its configuration."""
        configuration = self.configuration_for(identifier)
        del self._configurations[identifier]
        self.logger.info("Controller service deregistered", identifier=identifier)
        return configuration

    def configuration_for(self, identifier: str) -> ControllerServiceConfiguration:
        """
        Get the configuration of a registered service.

        Raises:
            UnknownServiceError: If identifier is not registered
        """
        configuration = self._configurations.get(identifier)
        if configuration is None:
            raise UnknownServiceError(identifier)
        return configuration

    def get_controller_service(self, identifier: str):
        return self.configuration_for(identifier).service

    def get_identifiers(self, service_type: type = None) -> List[str]:
        """Identifiers in registration order, optionally restricted to a service type."""
        return [
            identifier for identifier, configuration in self._configurations.items()
            if service_type is None or isinstance(configuration.service, service_type)
        ]

    def is_enabled(self, identifier: str) -> bool:
        return self.configuration_for(identifier).enabled

    def enable(self, identifier: str):
        configuration = self.configuration_for(identifier)
        if configuration.enabled:
            raise StateError(identifier, "enabled", "disabled", "enable")
        configuration.enabled = True
        self.logger.info("Controller service enabled", identifier=identifier)

    def disable(self, identifier: str):
        configuration = self.configuration_for(identifier)
        if not configuration.enabled:
            raise StateError(identifier, "disabled", "enabled", "disable")
        configuration.enabled = False
        self.logger.info("Controller service disabled", identifier=identifier)

    def set_service_property(self, identifier: str, descriptor: DescriptorRef, value: str,
                             validation_context=None) -> ValidationResult:
        """Set a property of a disabled service, with the usual store semantics."""
        configuration = self._modifiable(identifier, "set_property")
        return configuration.properties.set(descriptor, value, validation_context)

    def remove_service_property(self, identifier: str, descriptor: DescriptorRef) -> bool:
        configuration = self._modifiable(identifier, "remove_property")
        return configuration.properties.remove(descriptor)

    def set_annotation_data(self, identifier: str, annotation_data: Optional[str]):
        configuration = self._modifiable(identifier, "set_annotation_data")
        configuration.annotation_data = annotation_data

    def import_from(self, other: 'ControllerServiceRegistry'):
        """
        Copy every configuration of another registry into this one.

        Entries are copied, not shared: later changes on either side stay local.
        """
        for identifier, source in other._configurations.items():
            store = PropertyStore(source.service, service_lookup=self)
            store.seed(source.properties.configured())
            configuration = ControllerServiceConfiguration(
                identifier, source.service, store, source.annotation_data
            )
            configuration.enabled = source.enabled
            self._configurations[identifier] = configuration

    def _modifiable(self, identifier: str, operation: str) -> ControllerServiceConfiguration:
        configuration = self.configuration_for(identifier)
        if configuration.enabled:
            raise StateError(identifier, "enabled", "disabled", operation)
        return configuration

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._configurations

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._configurations))

    def __len__(self):
        return len(self._configurations)


class ControllerServiceLookup:
    """
    Read-only view of a ControllerServiceRegistry.

    Handed to validators so they can resolve services without changing
    the registry.
    """

    def __init__(self, registry: ControllerServiceRegistry):
        self._registry = registry

    def get_controller_service(self, identifier: str):
        return self._registry.get_controller_service(identifier)

    def get_identifiers(self, service_type: type = None) -> List[str]:
        return self._registry.get_identifiers(service_type)

    def is_enabled(self, identifier: str) -> bool:
        return self._registry.is_enabled(identifier)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._registry
