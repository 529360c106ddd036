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

"""Schema validation with catalog-aware diagnostics for YAML catalogs."""

__version__ = "0.1.0"

from .exceptions import (
    CatalogValidatorError,
    SchemaLoadError,
    SchemaCompilationError,
    DataSerializationError,
    ValidationExecutionError,
    CatalogKindError,
    CatalogLoadError,
)
from .models.keywords import CatalogKind, KeywordRole, ReservedKeyword
from .models.violation import ValidationResult, Violation, Severity
from .schema_validator import YamlSchemaValidator, yaml_schema_validator, validate_yaml_schema

__all__ = [
    "CatalogValidatorError",
    "SchemaLoadError",
    "SchemaCompilationError",
    "DataSerializationError",
    "ValidationExecutionError",
    "CatalogKindError",
    "CatalogLoadError",
    "CatalogKind",
    "KeywordRole",
    "ReservedKeyword",
    "ValidationResult",
    "Violation",
    "Severity",
    "YamlSchemaValidator",
    "yaml_schema_validator",
    "validate_yaml_schema",
]
