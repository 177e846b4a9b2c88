"""
File utility functions.

Structured files are read as JSON or YAML depending on their extension.
"""
import json
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = (".yaml", ".yml")


def read_json_file(file_path: str, encoding: str = "utf-8") -> Any:
    """
    Read a JSON file.

    Args:
        file_path: File path
        encoding: File encoding

    Returns:
        Parsed JSON data
    """
    with open(file_path, 'r', encoding=encoding) as f:
        return json.load(f)


def read_yaml_file(file_path: str, encoding: str = "utf-8") -> Any:
    """
    Read a YAML file.

    Args:
        file_path: File path
        encoding: File encoding

    Returns:
        Parsed YAML data
    """
    with open(file_path, 'r', encoding=encoding) as f:
        return yaml.safe_load(f)


def read_structured_file(file_path: str, encoding: str = "utf-8") -> Any:
    """Read a YAML file when the extension says so, JSON otherwise."""
    if Path(file_path).suffix.lower() in YAML_SUFFIXES:
        return read_yaml_file(file_path, encoding)
    return read_json_file(file_path, encoding)
