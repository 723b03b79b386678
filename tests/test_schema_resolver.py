import pytest

from llms_txt.utils.schema_resolver import ref_name, resolve_parameter_type, resolve_schema_type


def test_nested_arrays_resolve_recursively():
    schema = {"type": "array", "items": {"type": "array", "items": {"type": "string"}}}
    assert resolve_schema_type(schema) == "array[array[string]]"


def test_array_of_references():
    schema = {"type": "array", "items": {"$ref": "#/components/schemas/Pet"}}
    assert resolve_schema_type(schema) == "array[Pet]"


def test_array_without_items_is_plain_array():
    assert resolve_schema_type({"type": "array"}) == "array"


def test_primitive_type_is_returned_verbatim():
    assert resolve_schema_type({"type": "integer", "format": "int64"}) == "integer"
    assert resolve_schema_type({"type": "uuid-ish"}) == "uuid-ish"


@pytest.mark.parametrize(
    "ref, expected",
    [
        ("#/components/schemas/Pet", "Pet"),
        ("#/definitions/Order", "Order"),
        ("#/components/schemas/", "object"),
        ("", "object"),
    ],
)
def test_reference_name(ref, expected):
    assert resolve_schema_type({"$ref": ref}) == expected


def test_type_wins_over_reference():
    assert resolve_schema_type({"type": "string", "$ref": "#/components/schemas/Pet"}) == "string"


def test_untyped_schema_defaults_to_object():
    assert resolve_schema_type({}) == "object"
    assert resolve_schema_type({"properties": {"id": {"type": "integer"}}}) == "object"
    assert resolve_schema_type(None) == "object"
    assert resolve_schema_type(True) == "object"


def test_type_list_is_joined():
    assert resolve_schema_type({"type": ["string", "null"]}) == "string | null"


def test_ref_name_non_string():
    assert ref_name(None) == "object"
    assert ref_name("Pet") == "Pet"


def test_schema_takes_precedence_over_inline_type():
    param = {"name": "id", "in": "path", "type": "integer", "schema": {"type": "string"}}
    assert resolve_parameter_type(param) == "string"


def test_empty_schema_still_takes_precedence():
    assert resolve_parameter_type({"type": "integer", "schema": {}}) == "object"


def test_inline_type_and_default():
    assert resolve_parameter_type({"type": "integer"}) == "integer"
    assert resolve_parameter_type({"name": "q"}) == "string"
    assert resolve_parameter_type("not-a-parameter") == "string"
