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

"""Custom exceptions for the catalog validator.

Ordinary schema rule violations are never raised; they are collected into a
ValidationResult. Everything below is fatal and carries its cause.
"""


class CatalogValidatorError(Exception):
    """Base exception for catalog-validator related errors."""
    pass


class SchemaLoadError(CatalogValidatorError):
    """Exception raised when a schema document cannot be read or parsed."""
    pass


class SchemaCompilationError(CatalogValidatorError):
    """Exception raised when a schema document is invalid for the validation engine."""
    pass


class DataSerializationError(CatalogValidatorError):
    """Exception raised when a catalog document cannot be converted to JSON data."""
    pass


class ValidationExecutionError(CatalogValidatorError):
    """Exception raised when the validation engine itself faults."""
    pass


class CatalogKindError(CatalogValidatorError):
    """Exception raised for an unknown catalog kind discriminator."""
    pass


class CatalogLoadError(CatalogValidatorError):
    """Exception raised when a catalog YAML file cannot be read or parsed."""
    pass
