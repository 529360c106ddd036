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

"""Catalog kinds and their reserved keywords.

A reserved keyword is a field name with structural meaning inside a catalog
(``transformations``, ``sites``, ``containers`` ...). The pointer resolver uses
the keyword role of a field to decide how to describe the entry below it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Union

from ..exceptions import CatalogKindError


class CatalogKind(Enum):
    TRANSFORMATION = "transformation"
    SITE = "site"

    @classmethod
    def parse(cls, value: Union["CatalogKind", str]) -> "CatalogKind":
        """Accept an enum member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for kind in cls:
                if kind.value == normalized:
                    return kind
        valid = ", ".join(kind.value for kind in cls)
        raise CatalogKindError(f"Unknown catalog kind: {value!r}. Valid kinds: {valid}")


class KeywordRole(Enum):
    TRANSFORMATION = "transformation"
    SITE = "site"
    CONTAINER = "container"
    OTHER = "other"


@dataclass(frozen=True)
class ReservedKeyword:
    role: KeywordRole
    display_name: str


class KeywordRegistry:
    """Maps field names of one catalog kind to reserved keywords."""

    def __init__(self, keywords: Mapping[str, ReservedKeyword]):
        self._keywords: Dict[str, ReservedKeyword] = dict(keywords)

    def role_of(self, field_name: str) -> ReservedKeyword:
        """Return the reserved keyword for ``field_name``.

        Unknown names map to an OTHER keyword displayed under their own name.
        """
        keyword = self._keywords.get(field_name)
        if keyword is None:
            return ReservedKeyword(KeywordRole.OTHER, field_name)
        return keyword

    @staticmethod
    def display_name_of(keyword: ReservedKeyword) -> str:
        return keyword.display_name


def _other(name: str) -> ReservedKeyword:
    return ReservedKeyword(KeywordRole.OTHER, name)


TRANSFORMATION_KEYWORDS = KeywordRegistry(
    {
        "transformations": ReservedKeyword(KeywordRole.TRANSFORMATION, "transformations"),
        "site": ReservedKeyword(KeywordRole.SITE, "sites"),
        "sites": ReservedKeyword(KeywordRole.SITE, "sites"),
        "containers": ReservedKeyword(KeywordRole.CONTAINER, "containers"),
        "pegasus": _other("pegasus"),
        "namespace": _other("namespace"),
        "name": _other("name"),
        "version": _other("version"),
        "requires": _other("requires"),
        "hooks": _other("hooks"),
        "profiles": _other("profiles"),
        "metadata": _other("metadata"),
        "pfn": _other("pfn"),
        "type": _other("type"),
        "arch": _other("arch"),
        "os.type": _other("os.type"),
        "os.release": _other("os.release"),
        "os.version": _other("os.version"),
        "container": _other("container"),
        "image": _other("image"),
        "image.site": _other("image.site"),
        "mounts": _other("mounts"),
        "checksum": _other("checksum"),
        "bypass": _other("bypass"),
    }
)
