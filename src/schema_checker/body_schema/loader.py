"""
Load schema documents stored as JSON files.

Not imported by the package: callers that keep schemas on disk import this
module directly, so the checker itself stays free of file access.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


class SchemaLoadError(ValueError):
    """Raised when a schema file cannot be read or is not a JSON object."""


def load_schema(path: str | Path) -> Dict[str, Any]:
    schema_path = Path(path)
    try:
        text = schema_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"{schema_path}: cannot read schema file") from exc
    except UnicodeDecodeError as exc:
        raise SchemaLoadError(f"{schema_path}: schema file must be UTF-8") from exc

    try:
        schema = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaLoadError(f"{schema_path}: schema must be valid JSON") from exc

    if not isinstance(schema, dict):
        raise SchemaLoadError(f"{schema_path}: schema must be a JSON object")

    logger.debug("Loaded schema %s with %d top-level field(s)", schema_path.name, len(schema))
    return schema


def load_schemas(directory: str | Path) -> Dict[str, Dict[str, Any]]:
    """Load every ``*.json`` schema in a directory, keyed by file stem."""
    schema_dir = Path(directory)
    if not schema_dir.is_dir():
        raise SchemaLoadError(f"{schema_dir}: not a directory")

    return {path.stem: load_schema(path) for path in sorted(schema_dir.glob("*.json"))}
