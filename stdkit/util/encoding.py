"""
Encoding and decoding utilities for stdkit.
Provides JSON and YAML wrappers that report failures as EncodingError.
"""

import json
from typing import Any

import yaml

from ..errors import EncodingError


def json_encode(data: Any, pretty: bool = False) -> str:
    """
    Encode data to a JSON string.
    Handles dates and plain objects gracefully.
    """
    def json_serializer(obj):
        """Custom serializer for non-standard types."""
        if hasattr(obj, 'isoformat'):  # datetime objects
            return obj.isoformat()
        elif hasattr(obj, '_asdict'):  # namedtuples
            return obj._asdict()
        elif hasattr(obj, '__dict__'):  # custom objects
            return obj.__dict__
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    try:
        if pretty:
            return json.dumps(data, indent=2, separators=(',', ': '),
                              default=json_serializer, ensure_ascii=False)
        return json.dumps(data, default=json_serializer,
                          separators=(',', ':'), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Error when encoding json data: {e}", 'json', e)


def json_decode(json_str: str) -> Any:
    """Decode a JSON string to Python objects."""
    if not isinstance(json_str, (str, bytes, bytearray)):
        raise EncodingError(
            f"Error when decoding json string: expected str, got {type(json_str).__name__}",
            'json'
        )

    try:
        return json.loads(json_str)
    except ValueError as e:
        raise EncodingError(f"Error when decoding json string: {e}", 'json', e)


def yaml_encode(data: Any) -> str:
    """Encode data to a YAML document."""
    try:
        return yaml.safe_dump(data, default_flow_style=False, indent=2, sort_keys=False)
    except yaml.YAMLError as e:
        raise EncodingError(f"Error when encoding yaml data: {e}", 'yaml', e)


def yaml_decode(yaml_str: str) -> Any:
    """Decode a YAML document to Python objects."""
    try:
        return yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise EncodingError(f"Error when decoding yaml string: {e}", 'yaml', e)
