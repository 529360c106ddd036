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

"""Validate YAML catalogs against a JSON Schema with catalog-aware messages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from . import engine as schema_engine
from .diagnostics.formatter import format_violation
from .diagnostics.resolver import get_location_resolver
from .models.data_node import DataNode
from .models.json_schema_loader import load_schema
from .models.keywords import CatalogKind
from .models.parsing.yaml_parser import YamlParser, yaml_parser
from .models.violation import Severity, ValidationResult

logger = logging.getLogger(__name__)

SchemaSource = Union[Mapping[str, Any], str, Path]


class YamlSchemaValidator:
    """Stateless validator; every intermediate value lives inside a call."""

    def __init__(self, engine=None, parser: Optional[YamlParser] = None):
        self.engine = engine if engine is not None else schema_engine.default_engine
        self.parser = parser if parser is not None else yaml_parser

    @staticmethod
    def _resolve_schema(schema: SchemaSource) -> Mapping[str, Any]:
        if isinstance(schema, (str, Path)):
            return load_schema(schema)
        return schema

    def validate(
        self,
        document: Any,
        schema: SchemaSource,
        catalog_kind: Union[CatalogKind, str],
    ) -> ValidationResult:
        """Validate a parsed catalog document and explain every error.

        Args:
            document: Parsed YAML data (mappings, lists and scalars)
            schema: Schema dictionary, or path to a JSON schema file
            catalog_kind: "transformation" or "site" (or a CatalogKind)

        Returns:
            ValidationResult with one message per ERROR violation, in engine order

        Raises:
            CatalogKindError, SchemaLoadError, SchemaCompilationError,
            DataSerializationError, ValidationExecutionError
        """
        kind = CatalogKind.parse(catalog_kind)
        resolver = get_location_resolver(kind)

        schema_doc = self._resolve_schema(schema)
        data = schema_engine.to_json_data(document)
        compiled = self.engine.compile(schema_doc)
        report = self.engine.validate(compiled, data)

        root = DataNode(data)
        messages: List[str] = []
        yaml_paths: List[str] = []
        for violation in report.violations:
            if violation.severity is not Severity.ERROR:
                continue
            message = format_violation(violation) + resolver.resolve(violation.pointer, root)
            logger.debug(f"{violation.keyword} at '{violation.pointer_text}': {message}")
            messages.append(message)
            yaml_paths.append(violation.pointer_text)

        success = not messages and report.success
        if success:
            logger.debug(f"{kind.value} catalog is valid")
        else:
            logger.debug(f"{kind.value} catalog has {len(messages)} schema error(s)")

        return ValidationResult(
            success=success,
            messages=tuple(messages),
            yaml_paths=tuple(yaml_paths),
        )

    def validate_file(
        self,
        file_path: Union[str, Path],
        schema: SchemaSource,
        catalog_kind: Union[CatalogKind, str],
    ) -> ValidationResult:
        """Load a YAML catalog file and validate it."""
        document = self.parser.load_catalog(file_path)
        return self.validate(document, schema, catalog_kind)


# Global validator instance
yaml_schema_validator = YamlSchemaValidator()


def validate_yaml_schema(
    document: Any,
    schema: SchemaSource,
    catalog_kind: Union[CatalogKind, str],
) -> ValidationResult:
    """Validate ``document`` with the shared validator instance."""
    return yaml_schema_validator.validate(document, schema, catalog_kind)
