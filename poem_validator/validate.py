# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Validation pipeline: load, schema check, optional language check."""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import LanguageTagError, PoemValidatorError, SchemaValidationError
from .file_io.source_location import lookup_source
from .language import validate_language_codes
from .parsing.yaml_parser import yaml_parser
from .report import ValidationResult
from .validators import validate_schema

logger = logging.getLogger(__name__)


def validate_poem(document: Any, strict_language: bool = False, schema: Optional[dict] = None) -> None:
    """Validate a parsed poem document.

    Args:
        document: Parsed poem document
        strict_language: Also enforce ISO 639-3 (+ optional ISO 15924) language tags
        schema: Schema override, only meant for tests; defaults to the embedded schema

    Raises:
        SchemaDefinitionError: If the schema itself is invalid
        SchemaValidationError: With every schema violation found
        LanguageTagError: For the first language tag violation found
    """
    validate_schema(document, schema=schema)

    if strict_language:
        validate_language_codes(document)


def validate_file(file_path: Union[str, Path], strict_language: bool = False) -> ValidationResult:
    """Validate a poem file and collect the outcome.

    Args:
        file_path: Path to the poem file
        strict_language: Also enforce language tag checks

    Returns:
        ValidationResult; its errors are empty when the file is valid
    """
    path = Path(file_path)
    result = ValidationResult(path)
    source_map = {}

    try:
        document, source_map = yaml_parser.load_document_with_source(path)
        validate_poem(document, strict_language=strict_language)
    except SchemaValidationError as e:
        result.summary = "Schema validation failed"
        for issue in e.issues:
            loc = lookup_source(source_map, issue.yaml_path)
            result.add_error(str(issue), line=loc.line, column=loc.column, yaml_path=issue.yaml_path)
    except LanguageTagError as e:
        loc = lookup_source(source_map, e.yaml_path)
        result.add_error(str(e), line=loc.line, column=loc.column, yaml_path=e.yaml_path)
    except PoemValidatorError as e:
        result.add_error(str(e))

    if result.ok:
        logger.info(f"{path} is valid")
    else:
        logger.info(f"{path} failed validation with {len(result.errors)} error(s)")
    return result
