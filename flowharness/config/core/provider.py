"""
Configuration provider base classes and implementations.

This module provides the provider classes used to load harness settings,
either from a YAML file or from memory.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, TypeVar, Generic
from pathlib import Path
import yaml
import threading

from flowharness.core.exceptions import ConfigurationError
from flowharness.logger import get_harness_logger

T = TypeVar('T')


class ConfigProvider(ABC, Generic[T]):
    """
    Abstract base class for configuration providers.

    Defines the interface that all configuration providers must implement.
    """

    def __init__(self, domain: str):
        self.domain = domain
        self.logger = get_harness_logger().bind(component=f"ConfigProvider_{domain}")
        self._lock = threading.RLock()

    @abstractmethod
    def get_config(self) -> T:
        """Get current configuration."""
        pass

    @abstractmethod
    def update_config(self, updates: Dict[str, Any]) -> bool:
        """Update configuration with new values."""
        pass

    @abstractmethod
    def reset_to_defaults(self) -> bool:
        """Reset configuration to defaults."""
        pass


class FileConfigProvider(ConfigProvider[Dict[str, Any]]):
    """
    File-based configuration provider that reads from YAML files.
    """

    def __init__(self, domain: str, config_dir: str = "."):
        super().__init__(domain)
        self.config_dir = Path(config_dir)
        self._config_cache: Optional[Dict[str, Any]] = None
        self._last_modified: Optional[float] = None

    @property
    def config_file(self) -> Path:
        """Get the configuration file path for this domain."""
        return self.config_dir / f"{self.domain}.yaml"

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration from file."""
        with self._lock:
            self._refresh_cache()
            return self._config_cache.copy() if self._config_cache else {}

    def update_config(self, updates: Dict[str, Any]) -> bool:
        """Update configuration and save to file."""
        with self._lock:
            current_config = self.get_config()
            current_config.update(updates)
            self._save_config(current_config)
            self._config_cache = current_config
            self._last_modified = self.config_file.stat().st_mtime
            return True

    def reset_to_defaults(self) -> bool:
        """Reset to defaults by removing the config file."""
        with self._lock:
            if self.config_file.exists():
                self.config_file.unlink()
            self._config_cache = None
            self._last_modified = None
            return True

    def _refresh_cache(self):
        """Refresh configuration cache if file has changed."""
        if not self.config_file.exists():
            return

        current_mtime = self.config_file.stat().st_mtime
        if self._last_modified is None or current_mtime > self._last_modified:
            try:
                with open(self.config_file, 'r') as f:
                    loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(str(self.config_file), reason=f"invalid YAML: {e}") from e

            if not isinstance(loaded, dict):
                raise ConfigurationError(str(self.config_file), reason="top level must be a mapping")

            self._config_cache = loaded
            self._last_modified = current_mtime
            self.logger.debug("Config file loaded", path=str(self.config_file))

    def _save_config(self, config: Dict[str, Any]):
        """Save configuration to file."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, 'w') as f:
            yaml.dump(config, f, default_flow_style=False, indent=2)


class RuntimeConfigProvider(ConfigProvider[Dict[str, Any]]):
    """
    Runtime configuration provider that keeps config in memory.
    """

    def __init__(self, domain: str, initial_config: Optional[Dict[str, Any]] = None):
        super().__init__(domain)
        self._config = initial_config or {}

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration from memory."""
        with self._lock:
            return self._config.copy()

    def update_config(self, updates: Dict[str, Any]) -> bool:
        """Update configuration in memory."""
        with self._lock:
            new_config = self._config.copy()
            new_config.update(updates)
            self._config = new_config
            return True

    def reset_to_defaults(self) -> bool:
        """Reset to empty configuration."""
        with self._lock:
            self._config = {}
            return True
