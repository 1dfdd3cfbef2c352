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

"""Language tag validation for poem versions.

Each version's ``language`` field must be a tag of the form
``<base>[-<script>]``. Unlike schema validation, the first offending version
stops the check.
"""

import logging
from typing import Any

from ..exceptions import LanguageTagError
from ..file_io.source_location import json_pointer
from .code_tables import is_language_code, is_script_code

logger = logging.getLogger(__name__)

LANGUAGE_FIELD = "language"
TAG_SEPARATOR = "-"


def is_valid_language_tag(tag: str) -> bool:
    """Check a ``<base>[-<script>]`` tag against the code tables.

    Subtags after the script (region, variant, ...) are not checked.
    """
    parts = tag.split(TAG_SEPARATOR)

    if not is_language_code(parts[0]):
        return False

    if len(parts) >= 2 and not is_script_code(parts[1]):
        return False

    return True


def validate_language_codes(document: Any) -> None:
    """Check the language tag of every version in document order.

    Args:
        document: Parsed poem document

    Raises:
        LanguageTagError: For the first version whose language is missing,
            not a string, or not a valid tag
    """
    if not isinstance(document, dict):
        logger.debug("Document is not a mapping; skipping language checks")
        return

    for version_key, version_data in document.items():
        if not isinstance(version_data, dict) or LANGUAGE_FIELD not in version_data:
            raise LanguageTagError(
                f"Missing required language property in version '{version_key}' "
                f"(required with --strict-language)",
                version_key=version_key,
                yaml_path=json_pointer(version_key),
            )

        lang_code = version_data[LANGUAGE_FIELD]
        if not isinstance(lang_code, str):
            raise LanguageTagError(
                f"Language property must be a string in version '{version_key}'",
                version_key=version_key,
                yaml_path=json_pointer(version_key, LANGUAGE_FIELD),
            )

        if not is_valid_language_tag(lang_code):
            raise LanguageTagError(
                f"Invalid language tag '{lang_code}' in version '{version_key}'",
                version_key=version_key,
                yaml_path=json_pointer(version_key, LANGUAGE_FIELD),
            )

        logger.debug(f"Version '{version_key}' has valid language tag '{lang_code}'")
