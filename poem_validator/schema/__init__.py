"""Embedded poem schema.

The schema is a fixed resource shipped with the package; it is not loaded from
a user-supplied path.
"""

from .schema_loader import POEM_SCHEMA_PATH, load_poem_schema, clear_cache

__all__ = ["POEM_SCHEMA_PATH", "load_poem_schema", "clear_cache"]
