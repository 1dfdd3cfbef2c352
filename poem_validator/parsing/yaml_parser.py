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

"""YAML document loader with source position tracking."""

import datetime
import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

from ..exceptions import DocumentLoadError
from ..file_io.source_location import json_pointer_escape

logger = logging.getLogger(__name__)


SourceMap = Dict[str, Dict[str, int]]


def to_json_value(value: Any, _ancestors: Tuple[int, ...] = ()) -> Any:
    """Convert a YAML value tree into plain JSON-compatible values.

    PyYAML resolves timestamps and allows non-string mapping keys, neither of
    which a JSON Schema engine understands. Keys are stringified, dates become
    ISO-8601 strings, tuples and sets become lists. Keys that collide after
    stringification (``1`` and ``'1'``) keep the last value.

    Raises:
        DocumentLoadError: If a container contains itself (recursive alias)
    """
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        if id(value) in _ancestors:
            raise DocumentLoadError("Recursive YAML alias: a node contains itself")
        _ancestors = _ancestors + (id(value),)

    if isinstance(value, dict):
        return {str(key): to_json_value(item, _ancestors) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(item, _ancestors) for item in value]
    if isinstance(value, (set, frozenset)):
        return [to_json_value(item, _ancestors) for item in sorted(value, key=str)]
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class YamlParser:
    """Loads poem documents with PyYAML's safe loader."""

    @staticmethod
    def _build_source_map_from_yaml(content: str) -> SourceMap:
        """Build a mapping from JSON-pointer paths to 1-based line/column.

        This uses PyYAML's node tree so locations are tracked without changing
        the data returned by safe_load. Mapping keys are constructed the way
        safe_load constructs them, so ``yes:`` is recorded as ``/True``, the
        same path schema errors report.
        """
        source_map: SourceMap = {}
        loader = yaml.SafeLoader(content)

        def _record(path: str, node) -> None:
            mark = getattr(node, "start_mark", None)
            if mark is None:
                return
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

        def _key_token(key_node) -> str:
            try:
                return str(loader.construct_object(key_node, deep=True))
            except yaml.YAMLError:
                return str(key_node.value)

        def _walk(node, path: str, ancestors: frozenset) -> None:
            # Aliases share node objects; a recursive alias would loop forever.
            if id(node) in ancestors:
                return
            ancestors = ancestors | {id(node)}
            _record(path, node)

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    _walk(value_node, f"{path}/{json_pointer_escape(_key_token(key_node))}", ancestors)
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, f"{path}/{idx}", ancestors)

        try:
            root = loader.get_single_node()
            if root is not None:
                _walk(root, "", frozenset())
        except yaml.YAMLError:
            # Parse errors are reported by safe_load.
            return {}
        finally:
            loader.dispose()

        return source_map

    @staticmethod
    def _read_text(path: Path) -> str:
        if not path.exists():
            raise DocumentLoadError(f"Poem file not found: {path}")

        if not path.is_file():
            raise DocumentLoadError(f"Path is not a file: {path}")

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read poem file {path}: {exc}") from exc

    def load_document_from_string(self, content: str, source_name: str = "<string>") -> Any:
        """Parse YAML content into a document tree.

        Args:
            content: YAML text
            source_name: Name used in error messages

        Returns:
            Parsed document; ``None`` for an empty document

        Raises:
            DocumentLoadError: If content is not valid YAML or an alias
                refers to one of its own ancestors
        """
        try:
            document = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"Failed to parse YAML file {source_name}: {exc}") from exc

        try:
            to_json_value(document)
        except DocumentLoadError as exc:
            raise DocumentLoadError(f"Failed to parse YAML file {source_name}: {exc}") from exc
        return document

    def load_document(self, file_path: Union[str, Path]) -> Any:
        """Load a poem file.

        Args:
            file_path: Path to the poem file

        Returns:
            Parsed document

        Raises:
            DocumentLoadError: If the file cannot be read or parsed
        """
        path = Path(file_path)
        logger.debug(f"Loading poem file: {path}")
        content = self._read_text(path)
        return self.load_document_from_string(content, source_name=str(path))

    def load_document_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load a poem file and return (document, source_map).

        source_map keys are JSON-pointer-like YAML paths (e.g. "/v1/language").
        Values contain 1-based line/column.
        """
        path = Path(file_path)
        logger.debug(f"Loading poem file (with source): {path}")
        content = self._read_text(path)
        document = self.load_document_from_string(content, source_name=str(path))
        return document, self._build_source_map_from_yaml(content)


# Global parser instance
yaml_parser = YamlParser()
