"""Unified configuration management for the application."""
from __future__ import annotations
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from oopatterns.config.schemas import AppConfig
from oopatterns.config.utils.env_expansion import expand_config_env_vars
from oopatterns.domain.base.exceptions import ConfigurationError
from oopatterns.infrastructure.utilities.file_utils import read_structured_file

logger = logging.getLogger(__name__)

# Environment variables that override file values, mapped to (section, key)
ENV_OVERRIDES = {
    "OOPATTERNS_LOG_LEVEL": ("logging", "level"),
    "OOPATTERNS_LOG_DESTINATION": ("logging", "destination"),
    "OOPATTERNS_LOG_FILE": ("logging", "file_path"),
}


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    The typed ``AppConfig`` is loaded lazily on first access: from a JSON or
    YAML file when one was given, otherwise from defaults. Values have
    environment variables expanded and ``OOPATTERNS_*`` overrides applied
    before validation.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_typed(self, config_type: type = AppConfig) -> Any:
        """Return the typed configuration, or one of its sections by type."""
        if config_type is AppConfig:
            return self.app_config
        for name in type(self.app_config).model_fields:
            section = getattr(self.app_config, name)
            if isinstance(section, config_type):
                return section
        raise ConfigurationError(f"No configuration section of type {config_type.__name__}")

    def get(self, key: str, default: Any = None) -> Any:
        """Return a top-level section as plain data."""
        data = self.app_config.model_dump(mode="json")
        return data.get(key, default)

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
            return self.app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        raw: Dict[str, Any] = {}
        if self._config_file:
            raw = self._read_config_file(self._config_file)
        raw = expand_config_env_vars(raw)
        self._apply_env_overrides(raw)

        try:
            config = AppConfig(**raw)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} error(s)",
                details=e.errors(),
            ) from e

        logger.debug("Loaded configuration from %s", self._config_file or "defaults")
        return config

    @staticmethod
    def _read_config_file(config_file: str) -> Dict[str, Any]:
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            data = read_structured_file(str(path))
        except OSError as e:
            raise ConfigurationError(f"Could not read configuration file {config_file}: {e.strerror or e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Could not parse configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a mapping")
        return data

    @staticmethod
    def _apply_env_overrides(raw: Dict[str, Any]) -> None:
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                raw.setdefault(section, {})[key] = value
                logger.debug("Configuration %s.%s overridden by %s", section, key, env_name)


_config_manager: Optional[ConfigurationManager] = None
_config_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the process-level configuration manager.

    A new manager is created on first use, or when a different
    configuration file is requested.
    """
    global _config_manager
    manager = _config_manager
    if manager is None or (config_file and manager.config_file != config_file):
        with _config_manager_lock:
            manager = _config_manager
            if manager is None or (config_file and manager.config_file != config_file):
                manager = ConfigurationManager(config_file)
                _config_manager = manager
    return manager


def reset_config_manager() -> None:
    """Forget the process-level configuration manager."""
    global _config_manager
    with _config_manager_lock:
        _config_manager = None
