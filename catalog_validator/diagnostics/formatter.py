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

from typing import Any, Iterable

from ..models.data_node import render_value
from ..models.violation import Violation


def format_field_list(names: Iterable[Any]) -> str:
    return "[" + ", ".join(render_value(name) for name in names) + "]"


def format_violation(violation: Violation) -> str:
    """Return the keyword part of a message, ending with the connective for the location."""
    if violation.keyword == "additionalProperties":
        unwanted = format_field_list(violation.detail.get("unwanted", ()))
        return f"Unknown fields {unwanted} present in "
    if violation.keyword == "required":
        missing = format_field_list(violation.detail.get("missing", ()))
        return f"Missing required fields {missing} in "
    return f"{violation.message} in "
