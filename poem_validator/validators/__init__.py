"""Schema-level validation of poem documents."""

from .schema_validator import SchemaIssue, collect_schema_issues, validate_schema

__all__ = ["SchemaIssue", "collect_schema_issues", "validate_schema"]
