"""
Resolved property value wrapper.
"""

from typing import Optional

from flowharness.core.exceptions import ExpressionUsageError, HarnessError
from .descriptor import PropertyDescriptor

_TRUE_VALUES = {"true", "yes", "1", "on"}
_FALSE_VALUES = {"false", "no", "0", "off"}


class PropertyValue:
    """
    The effective value of a property as seen by a component.

    The descriptor is only attached when the owning harness has expression
    validation switched on; it is what evaluate_attribute_expressions checks.
    """

    def __init__(self, raw_value: Optional[str], service_lookup=None,
                 descriptor: Optional[PropertyDescriptor] = None):
        self._raw_value = raw_value
        self._service_lookup = service_lookup
        self.descriptor = descriptor

    def get_value(self) -> Optional[str]:
        return self._raw_value

    @property
    def value(self) -> Optional[str]:
        return self._raw_value

    def is_set(self) -> bool:
        return self._raw_value is not None

    def as_integer(self) -> Optional[int]:
        return None if self._raw_value is None else int(self._raw_value.strip())

    def as_float(self) -> Optional[float]:
        return None if self._raw_value is None else float(self._raw_value.strip())

    def as_boolean(self) -> Optional[bool]:
        if self._raw_value is None:
            return None
        text = self._raw_value.strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        raise ValueError(f"'{self._raw_value}' is not a boolean value")

    def as_controller_service(self, service_type: type = None):
        """
        Resolve the value as a controller service identifier.

        Parameters
        ----------
        service_type : type, optional
            When given, the registered service must be an instance of it.

        Raises
        ------
        UnknownServiceError
            If no service is registered under the identifier.
        """
        if self._raw_value is None:
            return None
        if self._service_lookup is None:
            raise HarnessError("property value is not bound to a controller service lookup")

        service = self._service_lookup.get_controller_service(self._raw_value)
        if service_type is not None and not isinstance(service, service_type):
            raise TypeError(
                f"controller service '{self._raw_value}' is a {type(service).__name__}, "
                f"not a {service_type.__name__}"
            )
        return service

    def evaluate_attribute_expressions(self) -> 'PropertyValue':
        """
        Return the value with expressions evaluated.

        Expression language is not interpreted here; the raw value is returned
        unchanged. What is checked is that the property allows expressions at
        all, which only happens when a descriptor is attached.
        """
        if self.descriptor is not None and not self.descriptor.supports_expression_language:
            raise ExpressionUsageError(self.descriptor.name)
        return PropertyValue(self._raw_value, self._service_lookup, self.descriptor)

    def __eq__(self, other):
        if isinstance(other, PropertyValue):
            return self._raw_value == other._raw_value
        return NotImplemented

    def __hash__(self):
        return hash(self._raw_value)

    def __str__(self):
        return "" if self._raw_value is None else self._raw_value

    def __repr__(self):
        return f"PropertyValue({self._raw_value!r})"
