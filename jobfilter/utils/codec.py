"""JSON and YAML utilities for persisted filters and catalogs."""

import json
from typing import Any
from datetime import datetime
from pathlib import Path

import yaml

from ..core.errors import SerializationError, DeserializationError


def to_json_string(obj: Any) -> str:
    """Convert object to JSON string with custom serialization support."""
    try:
        return json.dumps(
            obj,
            indent=2,
            sort_keys=True,
            default=_json_serializer,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to encode object to JSON: {e}") from e


def from_json_string(json_str: str) -> Any:
    """Parse JSON string to object."""
    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"Failed to decode JSON string: {e}") from e


def from_yaml_string(yaml_str: str) -> Any:
    """Parse YAML string to object."""
    try:
        return yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise DeserializationError(f"Failed to decode YAML string: {e}") from e


def read_document(path: Path) -> Any:
    """Load a JSON or YAML document, chosen by file suffix."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DeserializationError(f"Failed to read {path}: {e}") from e

    suffix = path.suffix.lower()
    if suffix == ".json":
        return from_json_string(content)
    if suffix in (".yml", ".yaml"):
        return from_yaml_string(content)
    raise DeserializationError(f"Unsupported document format: {path.suffix}")


def _json_serializer(obj: Any) -> Any:
    """Custom JSON serializer for special types."""
    if isinstance(obj, datetime):
        return obj.isoformat()
    elif isinstance(obj, Path):
        return str(obj)
    elif hasattr(obj, "model_dump"):
        # Pydantic v2 BaseModel
        return obj.model_dump(by_alias=True)
    elif hasattr(obj, "_asdict"):
        return obj._asdict()
    elif hasattr(obj, "__dict__"):
        return obj.__dict__
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
