import pytest

from flowharness.core.exceptions import ConfigurationError, StateError, UnknownServiceError
from flowharness.harness import ControllerServiceRegistry

from conftest import CacheService, ListProcessor


class TestControllerServiceRegistry:

    def setup_method(self):
        self.registry = ControllerServiceRegistry()
        self.service = CacheService("cache")

    def test_register_and_lookup(self):
        config = self.registry.register("cache", self.service, {"Region": "eu"}, "<notes/>")

        assert self.registry.configuration_for("cache") is config
        assert self.registry.get_controller_service("cache") is self.service
        assert config.annotation_data == "<notes/>"
        assert config.properties.get("Region").get_value() == "eu"
        assert "cache" in self.registry
        assert len(self.registry) == 1

    def test_registration_properties_bypass_validation(self):
        config = self.registry.register("cache", self.service, {"Max Entries": "lots"})

        assert config.properties.get("Max Entries").get_value() == "lots"
        assert self.service.modifications == []

    def test_register_replaces_existing(self):
        self.registry.register("cache", self.service, {"Region": "eu"})
        other = CacheService("cache")
        config = self.registry.register("cache", other)

        assert self.registry.get_controller_service("cache") is other
        assert config.get_properties() == {}

    def test_register_requires_service(self):
        with pytest.raises(ConfigurationError):
            self.registry.register("cache", None)

    def test_unknown_identifier(self):
        with pytest.raises(UnknownServiceError):
            self.registry.configuration_for("missing")
        with pytest.raises(LookupError):
            self.registry.get_controller_service("missing")

    def test_deregister(self):
        self.registry.register("cache", self.service)

        config = self.registry.deregister("cache")

        assert config.service is self.service
        assert "cache" not in self.registry
        with pytest.raises(UnknownServiceError):
            self.registry.deregister("cache")

    def test_identifiers_filtered_by_type(self):
        self.registry.register("cache", self.service)
        self.registry.register("other", ListProcessor())

        assert self.registry.get_identifiers() == ["cache", "other"]
        assert self.registry.get_identifiers(CacheService) == ["cache"]
        assert list(self.registry) == ["cache", "other"]


class TestServiceLifecycle:

    def setup_method(self):
        self.registry = ControllerServiceRegistry()
        self.service = CacheService("cache")
        self.registry.register("cache", self.service)

    def test_enable_disable(self):
        assert self.registry.is_enabled("cache") is False

        self.registry.enable("cache")
        assert self.registry.is_enabled("cache") is True

        self.registry.disable("cache")
        assert self.registry.is_enabled("cache") is False

    def test_enable_twice_is_a_state_error(self):
        self.registry.enable("cache")

        with pytest.raises(StateError):
            self.registry.enable("cache")

    def test_disable_when_disabled_is_a_state_error(self):
        with pytest.raises(StateError):
            self.registry.disable("cache")

    def test_set_property_on_disabled_service(self):
        result = self.registry.set_service_property("cache", "Max Entries", "5")

        assert result.valid is True
        assert self.registry.configuration_for("cache").properties.get("Max Entries").get_value() == "5"
        assert self.service.modifications[0][1:] == ("100", "5")

    def test_enabled_service_rejects_modification(self):
        self.registry.enable("cache")

        with pytest.raises(StateError):
            self.registry.set_service_property("cache", "Region", "us")
        with pytest.raises(StateError):
            self.registry.remove_service_property("cache", "Region")
        with pytest.raises(StateError):
            self.registry.set_annotation_data("cache", "x")
        assert self.service.modifications == []


class TestImport:

    def test_import_copies_configurations(self):
        source = ControllerServiceRegistry()
        service = CacheService("cache")
        source.register("cache", service, {"Region": "eu"}, "notes")
        source.enable("cache")

        target = ControllerServiceRegistry()
        target.import_from(source)

        copied = target.configuration_for("cache")
        assert copied.service is service
        assert copied.annotation_data == "notes"
        assert copied.enabled is True
        assert copied.get_properties() == source.configuration_for("cache").get_properties()

    def test_imported_entries_are_independent(self):
        source = ControllerServiceRegistry()
        source.register("cache", CacheService("cache"), {"Region": "eu"})

        target = ControllerServiceRegistry()
        target.import_from(source)
        target.set_service_property("cache", "Region", "us")

        assert source.configuration_for("cache").properties.get("Region").get_value() == "eu"
        assert target.configuration_for("cache").properties.get("Region").get_value() == "us"
