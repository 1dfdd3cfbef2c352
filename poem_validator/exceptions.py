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

"""Custom exceptions for the poem validator."""

from typing import Any, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .validators.schema_validator import SchemaIssue


class PoemValidatorError(Exception):
    """Base exception for poem validator errors."""
    pass


class DocumentLoadError(PoemValidatorError):
    """Exception raised when a poem file cannot be read or parsed."""
    pass


class SchemaDefinitionError(PoemValidatorError):
    """Exception raised when the embedded poem schema itself is broken."""
    pass


class SchemaValidationError(PoemValidatorError):
    """Exception raised when a document violates the poem schema.

    Carries every issue found, not only the first one.
    """

    def __init__(self, issues: List["SchemaIssue"]):
        self.issues = list(issues)
        lines = ["Schema validation failed:"]
        lines.extend(f"  ✖ {issue}" for issue in self.issues)
        super().__init__("\n".join(lines))


class LanguageTagError(PoemValidatorError):
    """Exception raised for a language tag violation in strict mode."""

    def __init__(self, message: str, version_key: Any = None, yaml_path: Optional[str] = None):
        super().__init__(message)
        self.version_key = version_key
        self.yaml_path = yaml_path
