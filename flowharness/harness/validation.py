"""
Validation dispatch.

A component validates itself; the harness only supplies a read-only view of
its configuration (ValidationContext) and collects the outcome. Every failing
result is reported, nothing stops at the first violation.
"""

from typing import Callable, Dict, List, Optional

from flowharness.component.descriptor import PropertyDescriptor
from flowharness.component.property_value import PropertyValue
from flowharness.component.result import ValidationResult
from flowharness.logger import get_harness_logger
from .service_registry import ControllerServiceLookup


class ValidationContext:
    """
    Read-only view of a MockProcessContext handed to validators.

    Exposes property lookups and controller service lookups, nothing that
    mutates the harness.
    """

    def __init__(self, process_context):
        self._context = process_context

    def get_property(self, descriptor) -> Optional[PropertyValue]:
        return self._context.get_property(descriptor)

    def get_properties(self) -> Dict[PropertyDescriptor, Optional[str]]:
        return self._context.get_properties()

    def get_annotation_data(self) -> Optional[str]:
        return self._context.annotation_data

    def new_property_value(self, raw_value: str) -> PropertyValue:
        return self._context.new_property_value(raw_value)

    def is_expression_language_supported(self, property_name: str) -> bool:
        descriptor = self._context.component.get_property_descriptor(property_name)
        return descriptor is not None and descriptor.supports_expression_language

    @property
    def controller_service_lookup(self) -> ControllerServiceLookup:
        return ControllerServiceLookup(self._context.services)

    def is_controller_service_enabled(self, identifier: str) -> bool:
        return self._context.services.is_enabled(identifier)

    def for_controller_service(self, service) -> 'ValidationContext':
        """
        Context for validating a controller service referenced by this component.

        The service is given its own harness, copied from this one's registry.
        """
        nested = type(self._context).for_controller_service(service, self._context)
        return ValidationContext(nested)


class ValidationDispatcher:
    """
    Runs a component's own validation and keeps only the failures.

    Args:
        component: the ConfigurableComponent being validated
        context_factory: builds a fresh ValidationContext for each pass
    """

    def __init__(self, component, context_factory: Callable[[], ValidationContext]):
        self.component = component
        self.context_factory = context_factory
        self.logger = get_harness_logger().bind(
            component="ValidationDispatcher", owner=type(component).__name__
        )

    def validate(self) -> List[ValidationResult]:
        results = self.component.validate(self.context_factory()) or []
        failures = [result for result in results if not result.valid]
        self.logger.debug("Validation completed", failures=len(failures))
        return failures

    def is_valid(self) -> bool:
        return not self.validate()

    def assert_valid(self):
        """
        Fail with every violation listed when the component is invalid.

        Raises:
            AssertionError: naming the failure count and each failing result
        """
        failures = self.validate()
        if failures:
            raise AssertionError(format_failures(failures))


def format_failures(failures: List[ValidationResult]) -> str:
    """Render failing results as a single diagnostic message."""
    lines = "".join(f"{failure}\n" for failure in failures)
    return f"Component has {len(failures)} validation failures:\n{lines}"


def validate_descriptors(component, context: ValidationContext) -> List[ValidationResult]:
    """
    Validate the effective value of every declared property.

    Meant to be called from a component's own validate(). Results for all
    descriptors are returned, valid ones included; required properties with
    no effective value are reported as invalid, and properties that identify
    a controller service must name a registered service of the right type.
    """
    results = []
    for descriptor in component.get_property_descriptors() or []:
        property_value = context.get_property(descriptor)
        value = property_value.get_value() if property_value is not None else None

        if value is None:
            if descriptor.required:
                results.append(ValidationResult.invalid(
                    descriptor.name, f"'{descriptor.name}' is required"
                ))
            continue

        if descriptor.identifies_controller_service is not None:
            reference = _validate_service_reference(descriptor, value, context)
            if not reference.valid:
                results.append(reference)
                continue

        results.append(descriptor.validate(value, context))
    return results


def _validate_service_reference(descriptor: PropertyDescriptor, value: str,
                                context: ValidationContext) -> ValidationResult:
    lookup = context.controller_service_lookup
    if value not in lookup:
        return ValidationResult.invalid(
            descriptor.name, f"no controller service is registered with identifier '{value}'", value
        )

    expected = descriptor.identifies_controller_service
    service = lookup.get_controller_service(value)
    if not isinstance(service, expected):
        return ValidationResult.invalid(
            descriptor.name,
            f"controller service '{value}' is not a {expected.__name__}", value
        )
    return ValidationResult.ok(descriptor.name, value)
