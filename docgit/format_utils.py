"""
Output format utilities for docgit CLI commands.

Provides functions to format data as JSON, JSONL and YAML.
"""

import json
import os
from typing import Any, Dict, Iterator

import yaml

FORMATS = ('json', 'jsonl', 'yaml')


def format_output(data: Iterator[Dict[str, Any]], format: str) -> Iterator[str]:
    """
    Format data according to the specified format.

    Args:
        data: Iterator of dictionaries to format
        format: Output format (json, jsonl, yaml)

    Yields:
        Formatted strings for output
    """
    if format == "jsonl":
        yield from format_jsonl(data)
    elif format == "json":
        yield from format_json(data)
    elif format == "yaml":
        yield from format_yaml(data)
    else:
        raise ValueError(f"Unknown format: {format}")


def format_jsonl(data: Iterator[Dict[str, Any]]) -> Iterator[str]:
    """Format data as JSON Lines (one JSON object per line)."""
    for item in data:
        yield json.dumps(item, ensure_ascii=False)


def format_json(data: Iterator[Dict[str, Any]]) -> Iterator[str]:
    """Format data as a single JSON array."""
    all_data = list(data)
    yield json.dumps(all_data, ensure_ascii=False, indent=2)


def format_yaml(data: Iterator[Dict[str, Any]]) -> Iterator[str]:
    """Format data as YAML."""
    all_data = list(data)
    yield yaml.safe_dump(all_data, default_flow_style=False, allow_unicode=True, sort_keys=False).rstrip("\n")


def get_format_from_env(default: str = 'jsonl') -> str:
    """
    Get output format from the DOCGIT_FORMAT environment variable.

    Unknown values fall back to default.
    """
    format = os.environ.get('DOCGIT_FORMAT', default).lower()
    if format not in FORMATS:
        return default
    return format


def format_single(item: Dict[str, Any], format: str) -> str:
    """Format one record; JSON is indented, JSONL stays on one line."""
    if format == "json":
        return json.dumps(item, ensure_ascii=False, indent=2)
    if format == "yaml":
        return yaml.safe_dump(item, default_flow_style=False, allow_unicode=True, sort_keys=False).rstrip("\n")
    return json.dumps(item, ensure_ascii=False)
