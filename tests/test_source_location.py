from pathlib import Path

from catalog_validator.file_io.source_location import SourceLocation, format_source, lookup_source

SOURCE_MAP = {
    "": {"line": 1, "column": 1},
    "/site": {"line": 2, "column": 3},
    "/site/0": {"line": 3, "column": 5},
}


def test_exact_lookup():
    loc = lookup_source(SOURCE_MAP, "/site/0")
    assert (loc.line, loc.column) == (3, 5)


def test_falls_back_to_closest_ancestor():
    loc = lookup_source(SOURCE_MAP, "/site/0/arch")
    assert loc.yaml_path == "/site/0/arch"
    assert (loc.line, loc.column) == (3, 5)


def test_no_source_map():
    assert lookup_source(None, "/site") == SourceLocation(yaml_path="/site")


def test_format_source():
    loc = SourceLocation(file_path=Path("sites.yml"), yaml_path="/site/0", line=3, column=5)
    assert format_source(loc) == " (source= sites.yml:3:5  yaml_path=/site/0)"
    assert format_source(SourceLocation()) == ""
    assert format_source(None) == ""
