"""Configuration schemas package."""

from .app_schema import AppConfig, SingletonDemoConfig, validate_config
from .logging_schema import LogDestination, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "SingletonDemoConfig",
    "validate_config",
    "LogDestination",
    "LoggingConfig",
    "LogLevel",
]
