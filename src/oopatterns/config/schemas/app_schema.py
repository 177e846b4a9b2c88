"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator, model_validator

from .logging_schema import LoggingConfig


class SingletonDemoConfig(BaseModel):
    """Settings for the singleton identity demonstration."""

    threads: int = Field(8, description="Threads racing for the first instance")

    @field_validator("threads")
    @classmethod
    def validate_threads(cls, v: int) -> int:
        """Validate thread count."""
        if v < 1 or v > 256:
            raise ValueError("Thread count must be between 1 and 256")
        return v


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    singleton: SingletonDemoConfig = Field(default_factory=lambda: SingletonDemoConfig())
    environment: str = Field("development", description="Environment")
    debug: bool = Field(False, description="Debug mode")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "staging", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v

    @model_validator(mode="after")
    def ensure_log_file(self) -> "AppConfig":
        """File logging needs somewhere to write."""
        if self.logging.writes_to_file() and not self.logging.file_path:
            raise ValueError("logging.file_path is required when logging to a file")
        return self


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate raw configuration data.

    Args:
        config: Configuration dictionary

    Returns:
        Validated configuration
    """
    return AppConfig(**config)
