"""Shared helper functions (env validation, JSON recovery, redaction)."""

from .json_extract import extract_first_json_object, parse_json_object
from .redact import safe_key_suffix
from .validation import validate_env

__all__ = [
    "extract_first_json_object",
    "parse_json_object",
    "safe_key_suffix",
    "validate_env",
]
