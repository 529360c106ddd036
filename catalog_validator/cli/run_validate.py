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

"""CLI entry point for validating YAML catalogs against a JSON schema."""

import argparse
import json
import logging
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config import validator_config
from ..exceptions import CatalogValidatorError
from ..file_io.source_location import SourceLocation, format_source, lookup_source
from ..models.json_schema_loader import load_schema
from ..models.keywords import CatalogKind
from ..models.parsing.yaml_parser import yaml_parser
from ..schema_validator import yaml_schema_validator

logger = logging.getLogger(__name__)


@dataclass
class FileReport:
    """Validation outcome for a single catalog file."""

    file_path: Path
    errors: List[Dict[str, Any]] = field(default_factory=list)
    fatal: Optional[str] = None

    @property
    def failed(self) -> bool:
        return bool(self.errors) or self.fatal is not None


def validate_files(file_paths: List[Path], schema_path: Path, catalog_kind: CatalogKind) -> List[FileReport]:
    """Validate each file; a fatal error in one file does not stop the others.

    Raises:
        SchemaLoadError: If the schema itself cannot be loaded
    """
    schema = load_schema(schema_path)
    reports = []

    for file_path in file_paths:
        report = FileReport(file_path=file_path)
        try:
            document, source_map = yaml_parser.load_catalog_with_source(file_path)
            result = yaml_schema_validator.validate(document, schema, catalog_kind)
        except CatalogValidatorError as e:
            logger.error(f"{file_path}: {e}")
            report.fatal = str(e)
            reports.append(report)
            continue

        for message, yaml_path in zip(result.messages, result.yaml_paths):
            loc = lookup_source(source_map, yaml_path)
            error = {"message": message, "yaml_path": yaml_path}
            if loc.line is not None:
                error["line"] = loc.line
            if loc.column is not None:
                error["column"] = loc.column
            report.errors.append(error)

        reports.append(report)

    return reports


def _print_human(reports: List[FileReport]) -> None:
    for report in reports:
        if not report.failed:
            continue
        print(f"\n{report.file_path}:")
        if report.fatal:
            print(f"  FATAL: {report.fatal}")
        for error in report.errors:
            line_info = f":{error['line']}" if "line" in error else ""
            src = SourceLocation(
                file_path=report.file_path,
                yaml_path=error.get("yaml_path"),
                line=error.get("line"),
                column=error.get("column"),
            )
            print(f"  ERROR{line_info}: {error['message']}{format_source(src)}")


def _print_json(reports: List[FileReport]) -> None:
    output = {
        "files": len(reports),
        "errors": sum(len(r.errors) for r in reports),
        "results": [
            {
                "file": str(r.file_path),
                "success": not r.failed,
                "fatal": r.fatal,
                "errors": r.errors,
            }
            for r in reports
        ],
    }
    print(json.dumps(output, indent=2))


def _print_github_actions(reports: List[FileReport]) -> None:
    for report in reports:
        if report.fatal:
            print(f"::error file={report.file_path},line=1::{report.fatal}")
        for error in report.errors:
            print(f"::error file={report.file_path},line={error.get('line', 1)}::{error['message']}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the validator CLI."""
    parser = argparse.ArgumentParser(
        prog="catalog-validate",
        description="Validate YAML transformation/site catalogs against a JSON schema",
    )
    parser.add_argument("catalogs", nargs="+", help="Catalog YAML files to validate")
    parser.add_argument("--schema", required=True, help="Path to the JSON schema file")
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in CatalogKind],
        default=CatalogKind.TRANSFORMATION.value,
        help="Catalog kind used to explain error locations (default: transformation)",
    )
    parser.add_argument(
        "--format",
        choices=["human", "json", "github-actions"],
        default="human",
        help="Output format (default: human)",
    )
    parser.add_argument("--log-level", default=None, help="Override CATALOG_VALIDATOR_LOG_LEVEL")

    args = parser.parse_args(argv)

    config = validator_config
    if args.log_level:
        config = replace(validator_config, log_level=args.log_level)
    config.set_logging()

    try:
        reports = validate_files(
            [Path(p) for p in args.catalogs],
            Path(args.schema),
            CatalogKind.parse(args.kind),
        )
    except CatalogValidatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == "json":
        _print_json(reports)
    elif args.format == "github-actions":
        _print_github_actions(reports)
    else:
        _print_human(reports)

    if any(r.failed for r in reports):
        sys.exit(1)
    if args.format == "human":
        print("Validation succeeded with no errors.")
    sys.exit(0)


if __name__ == "__main__":
    main()
