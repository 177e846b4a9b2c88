"""Environment variable expansion for configuration values."""

import os
import re
from typing import Any, Dict

# ${NAME:default}
_DEFAULTED_VAR = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in a configuration value.

    Strings support ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Unset
    variables without a default are left untouched. Dictionaries and lists
    are expanded recursively; other values are returned as they are.

    Args:
        value: Value to expand

    Returns:
        Value with environment variables expanded
    """
    if isinstance(value, str):
        value = _DEFAULTED_VAR.sub(lambda m: os.environ.get(m.group(1), m.group(2)), value)
        return os.path.expandvars(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables throughout a configuration dictionary."""
    return expand_env_vars(config)
