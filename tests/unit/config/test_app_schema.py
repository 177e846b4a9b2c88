"""Tests for the application configuration schema."""
import pytest
from pydantic import ValidationError

from oopatterns.config.schemas import (
    AppConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    SingletonDemoConfig,
    validate_config,
)


class TestAppConfig:
    """Test AppConfig defaults and validation."""

    def test_defaults(self):
        config = AppConfig()
        assert config.environment == "development"
        assert config.singleton.threads == 8
        assert config.logging.level is LogLevel.WARNING
        assert config.logging.destination is LogDestination.STDOUT
        assert not config.debug

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            AppConfig(environment="moon")

    def test_file_logging_needs_path(self):
        with pytest.raises(ValidationError, match="file_path"):
            AppConfig(logging={"destination": "file"})

    def test_file_logging_with_path(self):
        config = validate_config({"logging": {"destination": "both", "file_path": "logs/app.log"}})
        assert config.logging.writes_to_file()
        assert config.logging.writes_to_stdout()


class TestLoggingConfig:
    """Test LoggingConfig normalization."""

    def test_level_case_insensitive(self):
        assert LoggingConfig(level="debug").level is LogLevel.DEBUG

    def test_unknown_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="verbose")

    def test_negative_rotation_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(backup_count=-1)


class TestSingletonDemoConfig:
    """Test thread count bounds."""

    @pytest.mark.parametrize("threads", [1, 8, 256])
    def test_valid_threads(self, threads):
        assert SingletonDemoConfig(threads=threads).threads == threads

    @pytest.mark.parametrize("threads", [0, -1, 257])
    def test_invalid_threads(self, threads):
        with pytest.raises(ValidationError):
            SingletonDemoConfig(threads=threads)
