# Copyright 2025 TIER IV, inc.
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

"""YAML catalog parser with optional caching and source locations."""

import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Tuple, Union

from ...config import validator_config
from ...exceptions import CatalogLoadError

logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]


class YamlParser:
    """Loads catalog documents from YAML files or strings."""

    def __init__(self, cache_enabled: Optional[bool] = None):
        """Initialize YAML parser.

        Args:
            cache_enabled: Whether to enable caching. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else validator_config.cache_enabled
        self._cache: Dict[Path, Tuple[Any, SourceMap]] = {}

    @staticmethod
    def _json_pointer_escape(token: str) -> str:
        # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
        return token.replace("~", "~0").replace("/", "~1")

    @classmethod
    def _build_source_map_from_yaml(cls, content: str) -> SourceMap:
        """Build a mapping from JSON-pointer paths to 1-based line/column.

        Uses PyYAML's node tree (yaml.compose) so the data returned by
        safe_load keeps its plain shape.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            # Parse errors are reported by safe_load
            return source_map

        if root is None:
            return source_map

        def _record(path: str, node) -> None:
            mark = getattr(node, "start_mark", None)
            if mark is None:
                return
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

        def _walk(node, path: str) -> None:
            _record(path, node)

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, f"{path}/{cls._json_pointer_escape(str(key))}")
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, f"{path}/{idx}")

        _walk(root, "")
        return source_map

    def load_catalog_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load a YAML catalog file and return (data, source_map).

        source_map keys are JSON pointers (e.g. "/0/transformations/1/sites").
        Values contain 1-based line/column.
        """
        path = Path(file_path)

        if not path.exists():
            raise CatalogLoadError(f"Catalog file not found: {path}")

        if not path.is_file():
            raise CatalogLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading catalog from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading catalog file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogLoadError(f"Failed to read catalog file {path}: {exc}") from exc

        data, source_map = self.load_catalog_from_string_with_source(content, origin=str(path))

        if self.cache_enabled:
            self._cache[path] = (data, source_map)

        return data, source_map

    def load_catalog_from_string_with_source(
        self, content: str, origin: str = "<string>"
    ) -> Tuple[Any, SourceMap]:
        """Load a YAML catalog from string content and return (data, source_map)."""
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise CatalogLoadError(f"Failed to parse YAML {origin}: {exc}") from exc

        if data is None:
            data = {}

        return data, self._build_source_map_from_yaml(content)

    def load_catalog(self, file_path: Union[str, Path]) -> Any:
        """Load a YAML catalog file.

        Raises:
            CatalogLoadError: If the file cannot be read or parsed
        """
        data, _ = self.load_catalog_with_source(file_path)
        return data

    def load_catalog_from_string(self, content: str) -> Any:
        data, _ = self.load_catalog_from_string_with_source(content)
        return data

    def clear_cache(self):
        """Clear the catalog cache."""
        self._cache.clear()
        logger.debug("Catalog cache cleared")


# Global parser instance
yaml_parser = YamlParser()
