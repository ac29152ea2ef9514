"""
Shared pytest configuration and fixtures for the harness tests.

The components defined here play the part of real processors and
controller services: they own their descriptor catalogs and validators and
record every change notification they receive.
"""

import pytest

from flowharness.component import PropertyDescriptor, Relationship, ValidationResult
from flowharness.harness import MockProcessContext, validate_descriptors


def non_empty_validator(subject, value, context):
    if value.strip():
        return ValidationResult.ok(subject, value)
    return ValidationResult.invalid(subject, "value must not be empty", value)


def integer_validator(subject, value, context):
    try:
        int(value)
    except ValueError:
        return ValidationResult.invalid(subject, "value is not an integer", value)
    return ValidationResult.ok(subject, value)


def always_invalid_validator(subject, value, context):
    return ValidationResult.invalid(subject, "never accepted", value)


BATCH_SIZE = PropertyDescriptor(
    "Batch Size", default_value="10", validator=integer_validator, required=True
)
DIRECTORY = PropertyDescriptor(
    "Directory", validator=non_empty_validator, required=True, supports_expression_language=True
)
MODE = PropertyDescriptor(
    "Mode", default_value="append", allowable_values={"append", "replace"}
)
CACHE_SERVICE = PropertyDescriptor("Cache Service")

SUCCESS = Relationship("success", "Routed when processing succeeds")
FAILURE = Relationship("failure", "Routed when processing fails")


class RecordingComponent:
    """Base for test components: records on_property_modified calls."""

    descriptors = []

    def __init__(self):
        self.modifications = []

    def get_property_descriptor(self, name):
        for descriptor in self.descriptors:
            if descriptor.name == name:
                return descriptor
        return None

    def get_property_descriptors(self):
        return list(self.descriptors)

    def on_property_modified(self, descriptor, old_value, new_value):
        self.modifications.append((descriptor, old_value, new_value))

    def validate(self, context):
        return validate_descriptors(self, context)


class ListProcessor(RecordingComponent):
    """A routing processor with a small catalog."""

    descriptors = [BATCH_SIZE, DIRECTORY, MODE, CACHE_SERVICE]

    def get_relationships(self):
        return {SUCCESS, FAILURE}


class SinkComponent(RecordingComponent):
    """A non-routing component."""

    descriptors = [BATCH_SIZE]


class BrokenComponent(RecordingComponent):
    """Two required properties that can never be valid."""

    descriptors = [
        PropertyDescriptor("First", default_value="a", validator=always_invalid_validator, required=True),
        PropertyDescriptor("Second", default_value="b", validator=always_invalid_validator, required=True),
    ]


class DynamicComponent(RecordingComponent):
    """No declared catalog: accepts any property name."""

    def get_property_descriptor(self, name):
        return PropertyDescriptor(name)


class CacheService(RecordingComponent):
    """A controller service with its own properties."""

    descriptors = [
        PropertyDescriptor("Max Entries", default_value="100", validator=integer_validator),
        PropertyDescriptor("Region", validator=non_empty_validator, required=True),
    ]

    def __init__(self, identifier="cache"):
        super().__init__()
        self.identifier = identifier


class CacheClientProcessor(ListProcessor):
    """Validates the controller service its Cache Service property names."""

    def validate(self, context):
        results = validate_descriptors(self, context)
        service_id = context.get_property(CACHE_SERVICE).get_value()
        if service_id is None:
            return results

        if service_id not in context.controller_service_lookup:
            results.append(ValidationResult.invalid(
                CACHE_SERVICE.name, f"no controller service '{service_id}'", service_id
            ))
            return results

        service = context.controller_service_lookup.get_controller_service(service_id)
        nested = context.for_controller_service(service)
        results.extend(service.validate(nested))
        return results


@pytest.fixture
def processor():
    return ListProcessor()


@pytest.fixture
def context(processor):
    return MockProcessContext(processor)


def pytest_collection_modifyitems(items):
    """Tests not marked as integration are unit tests."""
    for item in items:
        if item.get_closest_marker("integration") is None:
            item.add_marker(pytest.mark.unit)
