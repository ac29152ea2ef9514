"""
Harness components for hosting a single component under test.

- MockProcessContext: the facade tests interact with
- PropertyStore: descriptor-keyed configured values
- ValidationDispatcher / ValidationContext: validation dispatch
- ControllerServiceRegistry: nested controller service configurations
- ControllerServiceLookup: read-only registry view handed to validators
- RelationshipOverlay: available relationships of routing components
"""

from .property_store import PropertyStore, descriptor_name
from .validation import ValidationContext, ValidationDispatcher, validate_descriptors, format_failures
from .service_registry import ControllerServiceRegistry, ControllerServiceConfiguration, ControllerServiceLookup
from .relationships import RelationshipOverlay
from .sensitive import obscure, reveal
from .process_context import MockProcessContext, MAX_CONCURRENT_TASKS

__all__ = [
    'MockProcessContext',
    'MAX_CONCURRENT_TASKS',
    'PropertyStore',
    'descriptor_name',
    'ValidationContext',
    'ValidationDispatcher',
    'validate_descriptors',
    'format_failures',
    'ControllerServiceRegistry',
    'ControllerServiceConfiguration',
    'ControllerServiceLookup',
    'RelationshipOverlay',
    'obscure',
    'reveal'
]
