"""Infrastructure utilities."""
from .file_utils import read_json_file, read_structured_file, read_yaml_file

__all__ = ["read_json_file", "read_structured_file", "read_yaml_file"]
