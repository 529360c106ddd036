import copy

import pytest

from catalog_validator import validate_yaml_schema, yaml_schema_validator
from catalog_validator.engine import CompiledSchema
from catalog_validator.exceptions import (
    CatalogKindError,
    CatalogValidatorError,
    DataSerializationError,
    SchemaCompilationError,
    SchemaLoadError,
)
from catalog_validator.models.violation import (
    EngineReport,
    Severity,
    ValidationResult,
    Violation,
    parse_pointer,
)
from catalog_validator.schema_validator import YamlSchemaValidator


class FakeEngine:
    """Returns a fixed report so resolver policies can be exercised directly."""

    def __init__(self, *violations):
        self.report = EngineReport(violations=tuple(violations))

    def compile(self, schema):
        return CompiledSchema(schema=schema, validator=None)

    def validate(self, compiled, data):
        return self.report


def test_valid_document(transformation_schema, valid_transformation_catalog):
    result = validate_yaml_schema(valid_transformation_catalog, transformation_schema, "transformation")
    assert result == ValidationResult(success=True, messages=(), yaml_paths=())


def test_missing_top_level_required_field():
    schema = {"type": "object", "required": ["pegasus"]}
    result = validate_yaml_schema({}, schema, "transformation")
    assert not result.success
    assert result.messages == ("Missing required fields [pegasus] in top level error",)


def test_missing_fields_are_listed_together():
    schema = {"type": "object", "required": ["pegasus", "site"]}
    result = validate_yaml_schema({}, schema, "site")
    assert result.messages == ("Missing required fields [pegasus, site] in top level error",)


def test_unknown_field(transformation_schema, valid_transformation_catalog):
    valid_transformation_catalog[0]["bogus"] = True
    result = validate_yaml_schema(valid_transformation_catalog, transformation_schema, "transformation")
    assert result.messages == ("Unknown fields [bogus] present in top level error",)
    assert result.yaml_paths == ("/0",)


def test_transformation_site_scenario(transformation_schema):
    document = [{"transformations": [{"name": "preprocess", "site": ["nonexistent-site"]}]}]
    result = validate_yaml_schema(document, transformation_schema, "transformation")

    assert not result.success
    assert len(result.messages) == 1
    message = result.messages[0]
    assert "transformations" in message
    assert ",Site - nonexistent-site" in message
    assert result.yaml_paths == ("/0/transformations/0/site/0",)


def test_transformation_scenario_with_mapping_root():
    entry = {
        "type": "object",
        "properties": {
            "transformations": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {"site": {"type": "array", "items": {"type": "object"}}},
                },
            }
        },
    }
    schema = {"type": "object", "additionalProperties": entry}
    document = {0: {"transformations": [{"site": ["nonexistent-site"]}]}}

    result = validate_yaml_schema(document, schema, "transformation")

    assert len(result.messages) == 1
    assert "transformations" in result.messages[0]
    assert ",Site - nonexistent-site" in result.messages[0]


def test_nested_site_missing_pfn(transformation_schema, valid_transformation_catalog):
    del valid_transformation_catalog[0]["transformations"][0]["sites"][0]["pfn"]
    result = validate_yaml_schema(valid_transformation_catalog, transformation_schema, "transformation")
    assert result.messages == (
        "Missing required fields [pfn] in transformations details - diamond,"
        'Site - {"name":"condorpool","type":"installed"}',
    )


def test_container_unknown_field(transformation_schema, valid_transformation_catalog):
    valid_transformation_catalog[0]["containers"][0]["mounts"] = []
    result = validate_yaml_schema(valid_transformation_catalog, transformation_schema, "transformation")
    assert result.messages == ("Unknown fields [mounts] present in containers details - centos-pegasus",)


def test_messages_follow_engine_order(transformation_schema, valid_transformation_catalog):
    valid_transformation_catalog[0]["transformations"][0]["name"] = 5
    valid_transformation_catalog[0]["containers"][0]["image"] = 7
    result = validate_yaml_schema(valid_transformation_catalog, transformation_schema, "transformation")
    assert len(result.messages) == 2
    assert result.messages[0].endswith("transformations details - diamond,property name - name")
    assert result.messages[1].endswith("containers details - centos-pegasus,property name - image")


def test_site_catalog_resolves_entry():
    entries = [{"name": "A"}, {"name": "B"}, {"name": "C", "arch": "x86_64"}]
    validator = YamlSchemaValidator(
        engine=FakeEngine(Violation(pointer=parse_pointer("/x/y/2"), keyword="type", message="bad entry"))
    )
    result = validator.validate({"site": entries}, {}, "site")
    assert result.messages == ('bad entry in {"name":"C","arch":"x86_64"}',)


def test_site_catalog_falls_back_to_raw_path(site_schema):
    document = {"site": [{"name": "local"}, "condorpool"]}
    result = validate_yaml_schema(document, site_schema, "site")
    assert len(result.messages) == 1
    assert result.messages[0].endswith(" in /site/1")


def test_site_catalog_top_level(site_schema):
    result = validate_yaml_schema({"pegasus": "5.0"}, site_schema, "site")
    assert result.messages == ("Missing required fields [site] in top level error",)


def test_warnings_are_ignored():
    validator = YamlSchemaValidator(
        engine=FakeEngine(
            Violation(pointer=(), keyword="format", message="unknown format", severity=Severity.WARNING)
        )
    )
    result = validator.validate({}, {}, "transformation")
    assert result.success
    assert result.messages == ()


def test_only_errors_are_reported_among_warnings():
    validator = YamlSchemaValidator(
        engine=FakeEngine(
            Violation(pointer=(), keyword="format", message="w", severity=Severity.WARNING),
            Violation(pointer=(), keyword="required", message="m", detail={"missing": ["name"]}),
        )
    )
    result = validator.validate({}, {}, "transformation")
    assert not result.success
    assert result.messages == ("Missing required fields [name] in top level error",)
    assert result.yaml_paths == ("",)


def test_validation_is_idempotent(transformation_schema, valid_transformation_catalog):
    valid_transformation_catalog[0]["bogus"] = 1
    del valid_transformation_catalog[0]["transformations"][0]["name"]
    first = yaml_schema_validator.validate(valid_transformation_catalog, transformation_schema, "transformation")
    second = yaml_schema_validator.validate(valid_transformation_catalog, transformation_schema, "transformation")
    assert first == second
    assert len(first.messages) == 2


def test_document_is_not_mutated(transformation_schema, valid_transformation_catalog):
    snapshot = copy.deepcopy(valid_transformation_catalog)
    valid_transformation_catalog[0]["bogus"] = 1
    snapshot[0]["bogus"] = 1
    validate_yaml_schema(valid_transformation_catalog, transformation_schema, "transformation")
    assert valid_transformation_catalog == snapshot


def test_schema_from_file(write_json, transformation_schema, valid_transformation_catalog):
    schema_path = write_json("tc.json", transformation_schema)
    assert validate_yaml_schema(valid_transformation_catalog, schema_path, "transformation").success
    assert validate_yaml_schema(valid_transformation_catalog, str(schema_path), "transformation").success


@pytest.mark.parametrize(
    "document, schema, kind, error",
    [
        ({}, {"type": "object"}, "replica", CatalogKindError),
        ({}, "/nonexistent/schema.json", "site", SchemaLoadError),
        ({}, {"type": 5}, "site", SchemaCompilationError),
        ({"bad": object()}, {"type": "object"}, "site", DataSerializationError),
    ],
)
def test_fatal_errors_share_a_base_class(document, schema, kind, error):
    with pytest.raises(error) as exc_info:
        validate_yaml_schema(document, schema, kind)
    assert isinstance(exc_info.value, CatalogValidatorError)


def test_validate_file(tmp_path, transformation_schema):
    catalog = tmp_path / "tc.yml"
    catalog.write_text(
        "- transformations:\n"
        "    - name: preprocess\n"
        "      site:\n"
        "        - nonexistent-site\n",
        encoding="utf-8",
    )
    result = yaml_schema_validator.validate_file(catalog, transformation_schema, "transformation")
    assert ",Site - nonexistent-site" in result.messages[0]
