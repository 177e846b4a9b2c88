"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    SingletonDemoConfig,
    validate_config,
)
from .manager import ConfigurationManager, get_config_manager, reset_config_manager

__all__ = [
    'AppConfig',
    'LogDestination',
    'LoggingConfig',
    'LogLevel',
    'SingletonDemoConfig',
    'validate_config',
    'ConfigurationManager',
    'get_config_manager',
    'reset_config_manager',
]
