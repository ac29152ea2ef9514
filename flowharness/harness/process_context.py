"""
MockProcessContext: a stand-in runtime context for one component under test.

The context composes the pieces a real runtime would provide:
    - a PropertyStore with descriptor-default fallback and change notification
    - a ValidationDispatcher reporting every violation in one pass
    - a ControllerServiceRegistry of nested service configurations
    - a RelationshipOverlay for routing components

Nothing is scheduled or run. Every call completes synchronously.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Set

from flowharness.component.descriptor import PropertyDescriptor, Relationship
from flowharness.component.property_value import PropertyValue
from flowharness.component.result import ValidationResult
from flowharness.config import HarnessSettings
from flowharness.core.exceptions import ConfigurationError, UnknownServiceError
from flowharness.logger import get_harness_logger
from .property_store import DescriptorRef, PropertyStore
from .relationships import RelationshipOverlay
from .sensitive import obscure, reveal
from .service_registry import ControllerServiceConfiguration, ControllerServiceRegistry
from .validation import ValidationContext, ValidationDispatcher

MAX_CONCURRENT_TASKS = 1


class MockProcessContext:
    """
    Configuration and validation harness for a single component.

    Parameters
    ----------
    component : ConfigurableComponent
        The component under test. Required.
    settings : HarnessSettings, optional
        Supplies the initial expression-validation toggles. Defaults to
        HarnessSettings(); nothing is read from disk.
    """

    def __init__(self, component, settings: Optional[HarnessSettings] = None):
        if component is None:
            raise ConfigurationError("component", reason="a component is required")

        self.component = component
        self.settings = settings if settings is not None else HarnessSettings()
        self.annotation_data: Optional[str] = None

        self._yield_called = False
        self._expression_validation = self.settings.expression_validation
        self._allow_expression_validation = self.settings.validate_expression_usage

        self.services = ControllerServiceRegistry()
        self.store = PropertyStore(component, service_lookup=self.services)
        self.relationships = RelationshipOverlay(component)
        self.dispatcher = ValidationDispatcher(component, lambda: ValidationContext(self))

        self.logger = get_harness_logger().bind(
            component="MockProcessContext", owner=type(component).__name__
        )

    @classmethod
    def for_controller_service(cls, service, context: 'MockProcessContext',
                               settings: Optional[HarnessSettings] = None) -> 'MockProcessContext':
        """
        Build a context for a controller service already configured in another context.

        The service's annotation data and properties are copied from `context`,
        and `context`'s whole service registry is imported.

        If the service is not registered in `context` yet (it is still being
        set up), the lookup failure is ignored and an empty context is
        returned. This is the only place an unknown service is not an error.
        """
        harness = cls(service, settings if settings is not None else context.settings)
        try:
            configuration = context.services.configuration_for(service.identifier)
        except UnknownServiceError:
            harness.logger.debug("Service not registered yet, starting empty", identifier=service.identifier)
            return harness

        harness.annotation_data = configuration.annotation_data
        harness.store.seed(configuration.get_properties())
        harness.services.import_from(context.services)
        return harness

    # Properties

    def get_property(self, descriptor: DescriptorRef) -> Optional[PropertyValue]:
        """Effective value of a property, or None if the component does not declare it."""
        attach = self._expression_validation and self._allow_expression_validation
        return self.store.get(descriptor, attach_descriptor=attach)

    def set_property(self, descriptor: DescriptorRef, value: str) -> ValidationResult:
        """
        Set a property and return its validation result.

        The value is stored even when the result is invalid.
        """
        return self.store.set(descriptor, value, ValidationContext(self))

    def remove_property(self, descriptor: DescriptorRef) -> bool:
        return self.store.remove(descriptor)

    def get_properties(self) -> Dict[PropertyDescriptor, Optional[str]]:
        return self.store.snapshot()

    def new_property_value(self, raw_value: str) -> PropertyValue:
        return PropertyValue(raw_value, self.services)

    def get_annotation_data(self) -> Optional[str]:
        return self.annotation_data

    def set_annotation_data(self, annotation_data: Optional[str]):
        self.annotation_data = annotation_data

    # Validation

    def validate(self) -> List[ValidationResult]:
        """Every failing validation result of the component; empty when valid."""
        return self.dispatcher.validate()

    def is_valid(self) -> bool:
        return self.dispatcher.is_valid()

    def assert_valid(self):
        self.dispatcher.assert_valid()

    def enable_expression_validation(self):
        self._expression_validation = True

    def disable_expression_validation(self):
        self._expression_validation = False

    def set_validate_expression_usage(self, validate: bool):
        self._allow_expression_validation = validate

    # Controller services

    @property
    def controller_service_lookup(self) -> ControllerServiceRegistry:
        return self.services

    def add_controller_service(self, identifier: str, service, properties: Mapping = None,
                               annotation_data: Optional[str] = None) -> ControllerServiceConfiguration:
        return self.services.register(identifier, service, properties, annotation_data)

    def remove_controller_service(self, identifier: str) -> ControllerServiceConfiguration:
        return self.services.deregister(identifier)

    def get_controller_service(self, identifier: str):
        return self.services.get_controller_service(identifier)

    def set_controller_service_property(self, identifier: str, descriptor: DescriptorRef,
                                        value: str) -> ValidationResult:
        """Set a property of a registered, disabled controller service."""
        service = self.services.get_controller_service(identifier)
        nested = ValidationContext(type(self).for_controller_service(service, self))
        return self.services.set_service_property(identifier, descriptor, value, nested)

    def remove_controller_service_property(self, identifier: str, descriptor: DescriptorRef) -> bool:
        return self.services.remove_service_property(identifier, descriptor)

    def enable_controller_service(self, identifier: str):
        self.services.enable(identifier)

    def disable_controller_service(self, identifier: str):
        self.services.disable(identifier)

    def validate_controller_service(self, identifier: str) -> List[ValidationResult]:
        """Validate a registered service with its own nested context."""
        service = self.services.get_controller_service(identifier)
        return type(self).for_controller_service(service, self).validate()

    def lease_controller_service(self, identifier: str):
        pass

    # Relationships

    def get_available_relationships(self) -> Set[Relationship]:
        return self.relationships.available()

    def set_unavailable_relationships(self, relationships: Iterable[Relationship]):
        self.relationships.mark_unavailable(relationships)

    def get_unavailable_relationships(self) -> frozenset:
        return self.relationships.unavailable

    # Runtime stand-ins

    @property
    def max_concurrent_tasks(self) -> int:
        return MAX_CONCURRENT_TASKS

    def yield_(self):
        self._yield_called = True

    @property
    def is_yield_called(self) -> bool:
        return self._yield_called

    def encrypt(self, unencrypted: str) -> str:
        return obscure(unencrypted)

    def decrypt(self, encrypted: str) -> str:
        return reveal(encrypted)
