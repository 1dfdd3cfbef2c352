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

"""Loader for the embedded poem JSON Schema."""

import json
import logging
from pathlib import Path
from typing import Optional

from ..exceptions import SchemaDefinitionError

logger = logging.getLogger(__name__)

POEM_SCHEMA_PATH = Path(__file__).parent / "poem.schema.json"

# Schema cache to avoid reloading the file
_SCHEMA_CACHE: Optional[dict] = None


def load_poem_schema() -> dict:
    """Load the embedded poem schema.

    Returns:
        Schema dictionary

    Raises:
        SchemaDefinitionError: If the schema file is missing or not valid JSON
    """
    global _SCHEMA_CACHE
    if _SCHEMA_CACHE is not None:
        return _SCHEMA_CACHE

    logger.debug(f"Loading poem schema: {POEM_SCHEMA_PATH}")
    try:
        with open(POEM_SCHEMA_PATH, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except OSError as e:
        raise SchemaDefinitionError(f"Invalid schema: cannot read {POEM_SCHEMA_PATH}: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaDefinitionError(f"Invalid schema: {POEM_SCHEMA_PATH} is not valid JSON: {e.msg}") from e

    _SCHEMA_CACHE = schema
    return schema


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    global _SCHEMA_CACHE
    _SCHEMA_CACHE = None
