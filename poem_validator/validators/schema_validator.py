from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError, ValidationError

from ..exceptions import SchemaDefinitionError, SchemaValidationError
from ..file_io.source_location import json_pointer
from ..parsing.yaml_parser import to_json_value
from ..schema import load_poem_schema

logger = logging.getLogger(__name__)


JsonPointer = str


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    yaml_path: JsonPointer = ""

    def __str__(self) -> str:
        return f"{self.yaml_path or '(root)'}: {self.message}"


def _issue_from_error(error: ValidationError) -> SchemaIssue:
    return SchemaIssue(message=error.message, yaml_path=json_pointer(*error.absolute_path))


def _sort_key(issue: SchemaIssue):
    return (issue.yaml_path, issue.message)


def _build_validator(schema: dict) -> Draft7Validator:
    try:
        Draft7Validator.check_schema(schema)
    except SchemaError as e:
        raise SchemaDefinitionError(f"Invalid schema: {e.message}") from e
    return Draft7Validator(schema)


def collect_schema_issues(document: Any, schema: Optional[dict] = None) -> List[SchemaIssue]:
    """Validate a poem document and return every schema violation.

    Args:
        document: Parsed YAML document
        schema: Schema to validate against; defaults to the embedded poem schema

    Returns:
        All issues, ordered by instance path then message. Empty if valid.

    Raises:
        SchemaDefinitionError: If the schema itself is invalid
    """
    if schema is None:
        schema = load_poem_schema()

    validator = _build_validator(schema)
    instance = to_json_value(document)

    issues = [_issue_from_error(error) for error in validator.iter_errors(instance)]
    issues.sort(key=_sort_key)
    logger.debug(f"Schema validation produced {len(issues)} issue(s)")
    return issues


def validate_schema(document: Any, schema: Optional[dict] = None) -> None:
    """Raise SchemaValidationError carrying all issues if the document is invalid."""
    issues = collect_schema_issues(document, schema=schema)
    if issues:
        raise SchemaValidationError(issues)
