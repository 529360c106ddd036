from catalog_validator.models.data_node import MISSING, DataNode
from catalog_validator.models.violation import Field, Index


def test_lookup_by_index_and_field():
    root = DataNode([{"name": "keg", "sites": [{"name": "local"}]}])
    assert root[0]["name"].value == "keg"
    assert root[Index(0)][Field("sites")][0]["name"].value == "local"


def test_missing_children_return_sentinel():
    root = DataNode({"site": [1, 2]})
    assert root["nope"] is MISSING
    assert root["site"][5] is MISSING
    assert root["site"]["abc"] is MISSING
    assert root["nope"]["deeper"][0] is MISSING
    assert DataNode("scalar")[0] is MISSING


def test_index_on_mapping_uses_key_text():
    root = DataNode({"0": {"transformations": []}})
    assert root[Index(0)]["transformations"].value == []
    assert DataNode({0: "int key"})[Index(0)].value == "int key"


def test_digit_field_on_sequence_is_an_index():
    assert DataNode(["a", "b"])[Field("1")].value == "b"


def test_string_forms():
    assert str(DataNode("nonexistent-site")) == "nonexistent-site"
    assert str(DataNode(None)) == "null"
    assert str(DataNode(True)) == "true"
    assert str(DataNode(3)) == "3"
    assert str(DataNode({"name": "condorpool", "arch": "x86_64"})) == '{"name":"condorpool","arch":"x86_64"}'
    assert str(DataNode(["a", 1])) == '["a",1]'
    assert str(MISSING) == "null"


def test_equality():
    assert DataNode({"a": 1}) == DataNode({"a": 1})
    assert DataNode(None) != MISSING


def test_unicode_digit_field_is_not_an_index():
    assert DataNode(["a", "b"])[Field("²")] is MISSING
