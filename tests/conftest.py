import json

import pytest


@pytest.fixture
def transformation_schema():
    site_entry = {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "pfn": {"type": "string"},
            "type": {"enum": ["installed", "stageable"]},
        },
        "required": ["name", "pfn"],
        "additionalProperties": False,
    }
    transformation = {
        "type": "object",
        "properties": {
            "namespace": {"type": "string"},
            "name": {"type": "string"},
            "version": {"type": "string"},
            "site": {"type": "array", "items": {"type": "object"}},
            "sites": {"type": "array", "items": site_entry},
        },
        "required": ["name"],
        "additionalProperties": False,
    }
    container = {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "type": {"type": "string"},
            "image": {"type": "string"},
        },
        "required": ["name", "image"],
        "additionalProperties": False,
    }
    return {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                "pegasus": {"type": "string"},
                "transformations": {"type": "array", "items": transformation},
                "containers": {"type": "array", "items": container},
            },
            "required": ["transformations"],
            "additionalProperties": False,
        },
    }


@pytest.fixture
def site_schema():
    return {
        "type": "object",
        "properties": {
            "pegasus": {"type": "string"},
            "site": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string"},
                        "arch": {"type": "string"},
                    },
                    "required": ["name"],
                },
            },
        },
        "required": ["site"],
    }


@pytest.fixture
def valid_transformation_catalog():
    return [
        {
            "pegasus": "5.0",
            "transformations": [
                {
                    "namespace": "diamond",
                    "name": "preprocess",
                    "sites": [
                        {"name": "condorpool", "pfn": "/usr/bin/pegasus-keg", "type": "installed"}
                    ],
                }
            ],
            "containers": [{"name": "centos-pegasus", "image": "docker:///centos:7"}],
        }
    ]


@pytest.fixture
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
