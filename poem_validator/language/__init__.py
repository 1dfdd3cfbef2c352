"""Strict language tag checks for poem versions."""

from .code_tables import is_language_code, is_script_code
from .tag_validator import is_valid_language_tag, validate_language_codes

__all__ = [
    "is_language_code",
    "is_script_code",
    "is_valid_language_tag",
    "validate_language_codes",
]
