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

"""ISO code table lookups.

Base languages are looked up in ISO 639-3 and scripts in ISO 15924, both as
shipped by pycountry. The tables are read-only and shared by the whole process.
"""

import pycountry


def is_language_code(code: str) -> bool:
    """Return True if ``code`` is a known ISO 639-3 language code (e.g. ``eng``)."""
    if not isinstance(code, str) or not code:
        return False
    return pycountry.languages.get(alpha_3=code) is not None


def is_script_code(code: str) -> bool:
    """Return True if ``code`` is a known ISO 15924 script code (e.g. ``Latn``)."""
    if not isinstance(code, str) or not code:
        return False
    return pycountry.scripts.get(alpha_4=code) is not None
