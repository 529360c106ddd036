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

"""Violation records, pointer segments and validation results."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Tuple, Union


@dataclass(frozen=True)
class Index:
    """Array position inside a pointer."""

    position: int

    def __str__(self) -> str:
        return str(self.position)


@dataclass(frozen=True)
class Field:
    """Object field name inside a pointer."""

    name: str

    def __str__(self) -> str:
        return self.name


PathSegment = Union[Index, Field]
Pointer = Tuple[PathSegment, ...]


_INDEX_RE = re.compile(r"[0-9]+")


def is_index_token(token: str) -> bool:
    """True for ASCII-digit tokens only."""
    return _INDEX_RE.fullmatch(token) is not None


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _jp_unescape(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def to_segment(raw: Any) -> PathSegment:
    """Convert a raw path element (int or str) into a typed segment."""
    if isinstance(raw, (Index, Field)):
        return raw
    if isinstance(raw, int) and not isinstance(raw, bool):
        return Index(raw)
    return Field(str(raw))


def to_pointer(raw_path: Iterable[Any]) -> Pointer:
    return tuple(to_segment(item) for item in raw_path)


def parse_pointer(text: str) -> Pointer:
    """Parse JSON pointer text such as ``/0/transformations/0/site``.

    All-digit tokens become :class:`Index`, everything else :class:`Field`.
    The empty string addresses the document root.
    """
    if not text:
        return ()
    if text.startswith("/"):
        text = text[1:]
    segments = []
    for token in text.split("/"):
        token = _jp_unescape(token)
        if is_index_token(token):
            segments.append(Index(int(token)))
        else:
            segments.append(Field(token))
    return tuple(segments)


def format_pointer(pointer: Iterable[PathSegment]) -> str:
    return "".join(f"/{_jp_escape(str(segment))}" for segment in pointer)


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Violation:
    """One schema rule failure reported by the validation engine.

    ``detail`` carries keyword specific data: ``unwanted`` for
    ``additionalProperties`` and ``missing`` for ``required``.
    """

    pointer: Pointer
    keyword: str
    message: str
    severity: Severity = Severity.ERROR
    detail: Mapping[str, Any] = field(default_factory=dict)

    @property
    def pointer_text(self) -> str:
        return format_pointer(self.pointer)


@dataclass(frozen=True)
class EngineReport:
    """Ordered output of one engine run."""

    violations: Tuple[Violation, ...] = ()

    @property
    def success(self) -> bool:
        return not any(v.severity is Severity.ERROR for v in self.violations)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one catalog document.

    ``yaml_paths[i]`` is the pointer text of the violation behind ``messages[i]``.
    """

    success: bool
    messages: Tuple[str, ...] = ()
    yaml_paths: Tuple[str, ...] = ()
