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

"""Read-only cursor over a parsed catalog document."""

from __future__ import annotations

import json
from typing import Any, Optional

from .violation import Field, Index, PathSegment, is_index_token


class DataNode:
    """One position inside a JSON-like document tree.

    Lookups never raise: an absent child is returned as :data:`MISSING`.
    """

    __slots__ = ("_value", "_missing")

    def __init__(self, value: Any, *, missing: bool = False):
        self._value = value
        self._missing = missing

    @property
    def value(self) -> Any:
        return self._value

    @property
    def is_missing(self) -> bool:
        return self._missing

    @staticmethod
    def _as_index(segment: PathSegment) -> Optional[int]:
        if isinstance(segment, Index):
            return segment.position
        if is_index_token(segment.name):
            return int(segment.name)
        return None

    def child(self, segment: PathSegment) -> "DataNode":
        """Look up a child by array index or field name."""
        if self._missing:
            return MISSING

        value = self._value
        if isinstance(value, dict):
            key = segment.name if isinstance(segment, Field) else str(segment.position)
            if key in value:
                return DataNode(value[key])
            # Documents that were not JSON-normalised may still carry int keys
            if isinstance(segment, Index) and segment.position in value:
                return DataNode(value[segment.position])
            return MISSING

        if isinstance(value, list):
            index = self._as_index(segment)
            if index is None or not 0 <= index < len(value):
                return MISSING
            return DataNode(value[index])

        return MISSING

    def __getitem__(self, key) -> "DataNode":
        if isinstance(key, (Index, Field)):
            return self.child(key)
        if isinstance(key, int) and not isinstance(key, bool):
            return self.child(Index(key))
        return self.child(Field(str(key)))

    def __eq__(self, other) -> bool:
        if not isinstance(other, DataNode):
            return NotImplemented
        return self._missing == other._missing and self._value == other._value

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        if self._missing:
            return "DataNode(<missing>)"
        return f"DataNode({self._value!r})"

    def __str__(self) -> str:
        if self._missing:
            return "null"
        return render_value(self._value)


def render_value(value: Any) -> str:
    """Render a document value: strings as-is, everything else as compact JSON."""
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError):
        return str(value)


MISSING = DataNode(None, missing=True)
