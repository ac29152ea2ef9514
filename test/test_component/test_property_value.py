import pytest

from flowharness.component import PropertyDescriptor, PropertyValue
from flowharness.core.exceptions import ExpressionUsageError, HarnessError


class TestPropertyValue:

    def test_accessors(self):
        value = PropertyValue("42")

        assert value.get_value() == "42"
        assert value.value == "42"
        assert value.is_set() is True
        assert value.as_integer() == 42
        assert value.as_float() == 42.0
        assert str(value) == "42"

    def test_unset_value(self):
        value = PropertyValue(None)

        assert value.is_set() is False
        assert value.as_integer() is None
        assert value.as_boolean() is None
        assert value.as_controller_service() is None
        assert str(value) == ""

    @pytest.mark.parametrize("raw,expected", [
        ("true", True), ("TRUE", True), ("yes", True), ("1", True),
        ("false", False), ("no", False), (" off ", False),
    ])
    def test_as_boolean(self, raw, expected):
        assert PropertyValue(raw).as_boolean() is expected

    def test_as_boolean_rejects_other_text(self):
        with pytest.raises(ValueError):
            PropertyValue("maybe").as_boolean()

    def test_as_integer_rejects_text(self):
        with pytest.raises(ValueError):
            PropertyValue("ten").as_integer()

    def test_controller_service_needs_lookup(self):
        with pytest.raises(HarnessError):
            PropertyValue("cache").as_controller_service()

    def test_equality_on_raw_value(self):
        assert PropertyValue("a") == PropertyValue("a")
        assert PropertyValue("a") != PropertyValue("b")

    def test_expression_check_requires_attached_descriptor(self):
        plain = PropertyDescriptor("Plain")
        el = PropertyDescriptor("Expr", supports_expression_language=True)

        assert PropertyValue("x").evaluate_attribute_expressions().get_value() == "x"
        assert PropertyValue("x", descriptor=el).evaluate_attribute_expressions().get_value() == "x"
        with pytest.raises(ExpressionUsageError) as excinfo:
            PropertyValue("x", descriptor=plain).evaluate_attribute_expressions()
        assert excinfo.value.property_name == "Plain"
