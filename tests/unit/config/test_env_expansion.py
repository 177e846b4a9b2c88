"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from oopatterns.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"LOG_ROOT": "/var/log/patterns"}):
            assert expand_env_vars("$LOG_ROOT") == "/var/log/patterns"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"LOG_ROOT": "/var/log/patterns"}):
            assert expand_env_vars("${LOG_ROOT}/app.log") == "/var/log/patterns/app.log"

    def test_expand_nonexistent_env_var(self):
        """Test that unset variables without a default are left untouched."""
        assert expand_env_vars("$NONEXISTENT_PATTERNS_VAR") == "$NONEXISTENT_PATTERNS_VAR"

    def test_default_used_when_unset(self):
        """Test ${VAR:default} falls back to the default."""
        assert expand_env_vars("${NONEXISTENT_PATTERNS_VAR:logs/app.log}") == "logs/app.log"

    def test_default_ignored_when_set(self):
        with patch.dict(os.environ, {"PATTERNS_THREADS": "16"}):
            assert expand_env_vars("${PATTERNS_THREADS:8}") == "16"

    def test_empty_default(self):
        assert expand_env_vars("x${NONEXISTENT_PATTERNS_VAR:}y") == "xy"

    def test_expand_nested_values(self):
        """Test expansion inside nested dictionaries and lists."""
        with patch.dict(os.environ, {"LOG_ROOT": "/logs"}):
            config = {
                "logging": {"file_path": "$LOG_ROOT/app.log"},
                "paths": ["$LOG_ROOT/a", "plain"],
            }
            assert expand_env_vars(config) == {
                "logging": {"file_path": "/logs/app.log"},
                "paths": ["/logs/a", "plain"],
            }

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(config) == config

    def test_expand_config_env_vars(self):
        """Test the main configuration expansion function."""
        with patch.dict(os.environ, {"PATTERNS_ENV": "testing"}):
            assert expand_config_env_vars({"environment": "$PATTERNS_ENV"}) == {"environment": "testing"}
