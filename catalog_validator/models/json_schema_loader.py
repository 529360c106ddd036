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

"""JSON Schema loader for catalog validation."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from ..config import validator_config
from ..exceptions import SchemaLoadError

logger = logging.getLogger(__name__)


# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[Path, dict] = {}


def load_schema(schema_path: Union[str, Path], cache_enabled: Optional[bool] = None) -> dict:
    """Load a JSON Schema file.

    Args:
        schema_path: Path to the schema file
        cache_enabled: Whether to reuse a previously loaded schema. If None, uses global config.

    Returns:
        Schema dictionary

    Raises:
        SchemaLoadError: If the file is missing, unreadable, invalid JSON or not an object
    """
    if cache_enabled is None:
        cache_enabled = validator_config.cache_enabled

    path = Path(schema_path)
    cache_key = path.resolve()
    if cache_enabled and cache_key in _SCHEMA_CACHE:
        logger.debug(f"Loading schema from cache: {path}")
        return _SCHEMA_CACHE[cache_key]

    if not path.is_file():
        raise SchemaLoadError(f"Schema file not found: {path}")

    logger.debug(f"Loading schema file: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON in schema file {path}: {e.msg}") from e
    except OSError as e:
        raise SchemaLoadError(f"Error in loading schema file {path}: {e}") from e

    if not isinstance(schema, dict):
        raise SchemaLoadError(
            f"Schema file {path} must contain a JSON object, got {type(schema).__name__}"
        )

    if cache_enabled:
        _SCHEMA_CACHE[cache_key] = schema

    return schema


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()
