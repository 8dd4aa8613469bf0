"""Recursive body-versus-schema checking with a boolean verdict."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from .config import DEFAULT_CONFIG, CheckerConfig
from .types import MISSING, TypeTag, matches_type

logger = logging.getLogger(__name__)

RESERVED_KEYS = frozenset({"type", "required"})


def validate(body: Any, schema: Any, *, config: CheckerConfig | None = None) -> bool:
    """
    Check a request body against a top-level schema.

    The top-level schema maps field names to schema nodes and has no
    ``type``/``required`` wrapper of its own. Returns True when every field
    passes; the first failing field stops the walk and returns False.
    """
    cfg = config or DEFAULT_CONFIG

    if not isinstance(schema, Mapping):
        logger.debug("$: schema must be a mapping")
        return False
    if not isinstance(body, Mapping):
        logger.debug("$: body must be a mapping")
        return False

    return _check_fields(body, schema, cfg, "$")


def is_valid_property(
    value: Any,
    node: Any,
    *,
    config: CheckerConfig | None = None,
    path: str = "$",
) -> bool:
    """
    Check one value against one schema node, descending into object nodes.

    Presence is the caller's concern: ``value`` is type-checked as given, so
    the ``MISSING`` sentinel only passes a node that allows "undefined".
    """
    return _check_property(value, node, config or DEFAULT_CONFIG, path)


def _check_property(value: Any, node: Any, cfg: CheckerConfig, path: str) -> bool:
    if not isinstance(node, Mapping):
        logger.debug("%s: schema node must be a mapping", path)
        return False

    declared = node.get("type")
    if not matches_type(value, declared):
        logger.debug("%s: value does not match type %r", path, declared)
        return False

    # Unions that include "object" are type-checked only, never descended.
    if not (isinstance(declared, str) and declared == TypeTag.OBJECT.value):
        return True

    children = {key: child for key, child in node.items() if key not in RESERVED_KEYS}
    return _check_fields(value, children, cfg, path)


def _check_fields(
    data: Mapping[str, Any],
    fields: Mapping[str, Any],
    cfg: CheckerConfig,
    path: str,
) -> bool:
    for key, child in fields.items():
        child_path = f"{path}.{key}"

        required = _required_flag(child)
        if required is None:
            logger.debug("%s: schema node needs a boolean 'required'", child_path)
            return False

        present = key in data
        if required and not present:
            logger.debug("%s: required field is missing", child_path)
            return False
        if not present and cfg.skip_absent_optional:
            continue

        if not _check_property(data.get(key, MISSING), child, cfg, child_path):
            return False

    return True


def _required_flag(node: Any) -> bool | None:
    if not isinstance(node, Mapping):
        return None
    required = node.get("required")
    if not isinstance(required, bool):
        return None
    return required
