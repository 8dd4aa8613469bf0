"""Schema-driven structural checks for API request bodies."""

from .checker import is_valid_property, validate
from .config import CheckerConfig
from .gate import (
    RequestBodyValidationError,
    gate_request_body,
    json_response,
    parse_json_body,
    rejection_response,
    require_valid_body,
)
from .types import MISSING, TypeTag, matches_type, runtime_type_tag

__all__ = [
    "CheckerConfig",
    "MISSING",
    "RequestBodyValidationError",
    "TypeTag",
    "gate_request_body",
    "is_valid_property",
    "json_response",
    "matches_type",
    "parse_json_body",
    "rejection_response",
    "require_valid_body",
    "runtime_type_tag",
    "validate",
]
