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

"""Turning schema violations into catalog-aware messages."""

from .formatter import format_violation, format_field_list
from .resolver import (
    LocationResolver,
    TransformationLocationResolver,
    SiteLocationResolver,
    get_location_resolver,
    TOP_LEVEL_ERROR,
)

__all__ = [
    "format_violation",
    "format_field_list",
    "LocationResolver",
    "TransformationLocationResolver",
    "SiteLocationResolver",
    "get_location_resolver",
    "TOP_LEVEL_ERROR",
]
