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

"""Adapter between the catalog validator and the ``jsonschema`` library.

The engine only reports *where* a document violates the schema; turning that
into catalog language is done in :mod:`catalog_validator.diagnostics`.
"""

from __future__ import annotations

import datetime
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Type

import jsonschema
from jsonschema.exceptions import SchemaError
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .exceptions import DataSerializationError, SchemaCompilationError, ValidationExecutionError
from .models.violation import EngineReport, Severity, Violation, to_pointer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledSchema:
    schema: Mapping[str, Any]
    validator: Any


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _key_text(key: Any) -> Any:
    if isinstance(key, (datetime.datetime, datetime.date, datetime.time)):
        return key.isoformat()
    return key


def _normalise_keys(value: Any) -> Any:
    # json.dumps only applies ``default`` to values, never to mapping keys
    if isinstance(value, Mapping):
        return {_key_text(key): _normalise_keys(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_normalise_keys(item) for item in value]
    return value


def to_json_data(document: Any) -> Any:
    """Convert a parsed YAML document into plain JSON data.

    Mapping keys become strings and YAML timestamps become ISO strings, which
    is what the schema sees.

    Raises:
        DataSerializationError: If the document cannot be represented as JSON
    """
    try:
        return json.loads(json.dumps(_normalise_keys(document), default=_json_default))
    except (TypeError, ValueError, RecursionError) as exc:
        raise DataSerializationError(f"Error in transforming the yaml data: {exc}") from exc


def compile_schema(schema: Mapping[str, Any]) -> CompiledSchema:
    """Select the draft validator for ``schema`` and check the schema itself.

    Raises:
        SchemaCompilationError: If the schema is not a valid JSON Schema
    """
    if not isinstance(schema, Mapping):
        raise SchemaCompilationError(
            f"Schema must be a mapping/object, got {type(schema).__name__}"
        )
    try:
        validator_cls: Type = jsonschema.validators.validator_for(schema)
        validator_cls.check_schema(schema)
        validator = validator_cls(schema)
    except SchemaError as exc:
        raise SchemaCompilationError(f"Error in schema processing: {exc.message}") from exc
    except Exception as exc:
        raise SchemaCompilationError(f"Error in schema processing: {exc}") from exc

    logger.debug(f"Compiled schema with {type(validator).__name__}")
    return CompiledSchema(schema=schema, validator=validator)


def _unwanted_fields(error: JsonSchemaValidationError) -> List[str]:
    instance = error.instance
    schema = error.schema if isinstance(error.schema, Mapping) else {}
    if not isinstance(instance, Mapping):
        return []
    properties = schema.get("properties", {})
    patterns = schema.get("patternProperties", {})
    return [
        name
        for name in instance
        if name not in properties and not any(re.search(pattern, name) for pattern in patterns)
    ]


def _missing_fields(error: JsonSchemaValidationError) -> List[str]:
    instance = error.instance
    required = error.validator_value
    if not isinstance(instance, Mapping) or not isinstance(required, list):
        return []
    return [name for name in required if name not in instance]


def _detail_for(error: JsonSchemaValidationError) -> Dict[str, Any]:
    if error.validator == "additionalProperties":
        return {"unwanted": _unwanted_fields(error)}
    if error.validator == "required":
        return {"missing": _missing_fields(error)}
    return {}


def validate(compiled: CompiledSchema, data: Any) -> EngineReport:
    """Validate ``data`` and return the violations in engine order.

    jsonschema reports one error per missing required property; those are
    folded into a single violation per object that lists every missing name.

    Raises:
        ValidationExecutionError: If the engine itself fails (e.g. an unresolvable $ref)
    """
    violations: List[Violation] = []
    seen_required = set()

    try:
        for error in compiled.validator.iter_errors(data):
            pointer = to_pointer(error.absolute_path)
            if error.validator == "required":
                key = (pointer, tuple(error.absolute_schema_path))
                if key in seen_required:
                    continue
                seen_required.add(key)

            violations.append(
                Violation(
                    pointer=pointer,
                    keyword=str(error.validator),
                    message=error.message,
                    severity=Severity.ERROR,
                    detail=_detail_for(error),
                )
            )
    except Exception as exc:
        raise ValidationExecutionError(f"Error in schema processing: {exc}") from exc

    return EngineReport(violations=tuple(violations))


class SchemaEngine:
    """Object form of the engine functions, for callers that inject a collaborator."""

    def compile(self, schema: Mapping[str, Any]) -> CompiledSchema:
        return compile_schema(schema)

    def validate(self, compiled: CompiledSchema, data: Any) -> EngineReport:
        return validate(compiled, data)


default_engine = SchemaEngine()
