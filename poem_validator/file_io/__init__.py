"""File-backed diagnostics helpers."""

from .source_location import SourceLocation, lookup_source, json_pointer, json_pointer_escape

__all__ = [
    "SourceLocation",
    "lookup_source",
    "json_pointer",
    "json_pointer_escape",
]
