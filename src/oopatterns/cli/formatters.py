"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI:
- JSON and YAML dumps
- Rich tables for quotes, policy types and key/value results
"""

import io
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    elif format_type == "table":
        return format_table_output(data)
    else:
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "quotes" in data:
        return format_quotes_table(data["quotes"])
    elif isinstance(data, dict) and "policy_types" in data:
        return format_policy_types_table(data["policy_types"])
    elif isinstance(data, dict):
        return format_key_value_table(data)
    else:
        return json.dumps(data, indent=2, default=str)


def format_quotes_table(quotes: List[Dict[str, Any]]) -> str:
    """Format policy quotes as a table."""
    if not quotes:
        return "No quotes."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Policy", style="cyan")
    table.add_column("Intermediate", style="yellow", justify="right")
    table.add_column("Premium", style="green", justify="right")
    table.add_column("Steps")

    for quote in quotes:
        table.add_row(
            str(quote.get("policy_type", "N/A")),
            _format_number(quote.get("intermediate")),
            _format_number(quote.get("premium")),
            " -> ".join(quote.get("steps", [])),
        )
    return _render(table)


def format_policy_types_table(policy_types: List[Dict[str, Any]]) -> str:
    """Format available policy types as a table."""
    if not policy_types:
        return "No policy types found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Policy type", style="cyan")
    table.add_column("Description")
    for policy_type in policy_types:
        table.add_row(str(policy_type.get("name", "N/A")), str(policy_type.get("description", "")))
    return _render(table)


def format_key_value_table(data: Dict[str, Any]) -> str:
    """Format a flat (or nested) mapping as a two column table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in _flatten(data).items():
        table.add_row(key, _format_number(value))
    return _render(table)


def _flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{name}."))
        else:
            flat[name] = value
    return flat


def _format_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return "N/A" if value is None else str(value)


def _render(table: Table) -> str:
    buffer = io.StringIO()
    Console(file=buffer, width=120, no_color=True).print(table)
    return buffer.getvalue().rstrip("\n")
