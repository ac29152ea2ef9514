"""
Property descriptors and relationships.

Both types are identified by name only: a caller may pass a stand-in built
from just a name and still address the component's fully populated descriptor.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, FrozenSet

from .result import ValidationResult

# (subject, value, validation_context) -> ValidationResult
Validator = Callable[[str, str, Any], ValidationResult]


@dataclass(frozen=True, eq=False)
class PropertyDescriptor:
    """
    Identity, default value and validator for one configurable property.

    Attributes
    ----------
    name : str
        Unique within a component; the only attribute used for equality.
    default_value : str, optional
        Effective value while the property is not explicitly configured.
    validator : callable, optional
        Owned by the component. Absent means every value is accepted.
    allowable_values : frozenset, optional
        When set, values outside it are rejected before the validator runs.
    identifies_controller_service : type, optional
        Service type the property's value refers to by identifier.
    """
    name: str
    default_value: Optional[str] = None
    validator: Optional[Validator] = field(default=None, repr=False)
    description: str = ""
    required: bool = False
    sensitive: bool = False
    supports_expression_language: bool = False
    allowable_values: Optional[FrozenSet[str]] = None
    identifies_controller_service: Optional[type] = field(default=None, repr=False)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("descriptor name must be a non-empty string")
        if self.allowable_values is not None and not isinstance(self.allowable_values, frozenset):
            object.__setattr__(self, 'allowable_values', frozenset(self.allowable_values))

    def __eq__(self, other):
        if not isinstance(other, PropertyDescriptor):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def validate(self, value: str, context) -> ValidationResult:
        """Validate a candidate value for this property."""
        if self.allowable_values is not None and value not in self.allowable_values:
            allowed = ", ".join(sorted(self.allowable_values))
            return ValidationResult.invalid(
                self.name, f"given value not found in allowed set '{allowed}'", value
            )
        if self.validator is None:
            return ValidationResult.ok(self.name, value)
        return self.validator(self.name, value, context)


@dataclass(frozen=True, eq=False)
class Relationship:
    """A named routing outcome a flow-routing component may send output to."""
    name: str
    description: str = ""

    def __eq__(self, other):
        if not isinstance(other, Relationship):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)
