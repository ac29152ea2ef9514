from flowharness.config import HarnessSettings
from flowharness.logger import init_logger

# Initialize logging with the default settings
settings = HarnessSettings()
logger = init_logger(settings)

from flowharness.component import (
    PropertyDescriptor, Relationship, ValidationResult, PropertyValue,
    ConfigurableComponent, RoutingComponent, ControllerService
)
from flowharness.harness import MockProcessContext, validate_descriptors
