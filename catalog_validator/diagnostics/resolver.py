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

"""Reverse-map violation pointers to catalog entries.

The schema engine reports a position such as ``/0/transformations/2/sites/0``.
Each catalog kind has a known layout, so replaying the pointer against the
document recovers which transformation, site or container the position
belongs to.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from itertools import zip_longest
from typing import Dict, Iterator, List, Optional, Tuple, Type

import yaml

from ..models.data_node import DataNode
from ..models.keywords import (
    CatalogKind,
    KeywordRegistry,
    KeywordRole,
    TRANSFORMATION_KEYWORDS,
)
from ..models.violation import Field, PathSegment, Pointer, format_pointer, is_index_token

logger = logging.getLogger(__name__)

TOP_LEVEL_ERROR = "top level error"


def dump_yaml(node: DataNode) -> str:
    """Serialize a node as flow-style YAML, falling back to its plain string form."""
    value = None if node.is_missing else node.value
    try:
        text = yaml.safe_dump(value, default_flow_style=True, sort_keys=False, width=float("inf")).strip()
    except yaml.YAMLError:
        return str(node)
    if text.endswith("..."):
        text = text[:-3].rstrip()
    return text


def _pairs(segments: Pointer) -> Iterator[Tuple[PathSegment, Optional[PathSegment]]]:
    """Group ``a, b, c, d, e`` as ``(a, b), (c, d), (e, None)``."""
    it = iter(segments)
    return zip_longest(it, it)


class LocationResolver(ABC):
    """Describes where in a catalog a pointer lands."""

    KIND: CatalogKind

    @abstractmethod
    def resolve(self, pointer: Pointer, root: DataNode) -> str:
        """Return the location text appended after the violation message."""


class TransformationLocationResolver(LocationResolver):
    """Transformation catalogs: ``/<entry>/<field>/<index>/<field>/...``."""

    KIND = CatalogKind.TRANSFORMATION

    def __init__(self, registry: KeywordRegistry = TRANSFORMATION_KEYWORDS):
        self.registry = registry

    def _describe(self, field_name: str, current: DataNode) -> str:
        keyword = self.registry.role_of(field_name)
        if keyword.role is KeywordRole.TRANSFORMATION:
            return " details - " + dump_yaml(current[Field("namespace")])
        if keyword.role is KeywordRole.SITE:
            return ",Site - " + str(current)
        if keyword.role is KeywordRole.CONTAINER:
            return " details - " + dump_yaml(current[Field("name")])
        return ",property name -" + self.registry.display_name_of(keyword)

    def resolve(self, pointer: Pointer, root: DataNode) -> str:
        if len(pointer) <= 2:
            return TOP_LEVEL_ERROR

        field_name = str(pointer[1])
        current = root[pointer[0]][pointer[1]]
        parts: List[str] = [field_name]

        rest = pointer[2:]
        for position, (index_segment, name_segment) in enumerate(_pairs(rest)):
            current = current[index_segment]
            parts.append(self._describe(field_name, current))

            if name_segment is None:
                break
            field_name = str(name_segment)
            if 2 * position + 2 == len(rest):
                parts.append(",property name - " + field_name)
            else:
                current = current[name_segment]

        return "".join(parts)


class SiteLocationResolver(LocationResolver):
    """Site catalogs: ``/<ignored>/<ignored>/<index>`` into the ``site`` list.

    Pointers that do not fit the layout fall back to the raw pointer text.
    """

    KIND = CatalogKind.SITE
    SITE_KEY = "site"
    INDEX_POSITION = 2

    def resolve(self, pointer: Pointer, root: DataNode) -> str:
        if len(pointer) <= 1:
            return TOP_LEVEL_ERROR

        try:
            segment = pointer[self.INDEX_POSITION]
            if isinstance(segment, Field) and not is_index_token(segment.name):
                raise ValueError(f"'{segment.name}' is not a site index")
            entry = root[Field(self.SITE_KEY)][segment]
            if entry.is_missing:
                raise LookupError(f"no site entry at index {segment}")
            return str(entry)
        except (LookupError, TypeError, ValueError) as exc:
            path = format_pointer(pointer)
            logger.debug(f"Could not resolve site entry for {path}: {exc}")
            return path


_RESOLVERS: Dict[CatalogKind, Type[LocationResolver]] = {
    CatalogKind.TRANSFORMATION: TransformationLocationResolver,
    CatalogKind.SITE: SiteLocationResolver,
}


def get_location_resolver(kind: CatalogKind) -> LocationResolver:
    """Get the location resolver for a catalog kind."""
    return _RESOLVERS[kind]()
