"""
Type resolution utilities for OpenAPI specifications.
Turns parameter and schema objects into the short type names printed in the docs.
"""
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_TYPE = "object"
DEFAULT_PARAMETER_TYPE = "string"


def ref_name(ref: Any) -> str:
    """
    Extract the referenced component name from a $ref string.

    Args:
        ref: Reference value, e.g. "#/components/schemas/Pet".

    Returns:
        Final path segment of the reference, or "object" when it is empty.
    """
    if not isinstance(ref, str):
        return DEFAULT_SCHEMA_TYPE
    return ref.split("/")[-1] or DEFAULT_SCHEMA_TYPE


def resolve_schema_type(schema: Any) -> str:
    """
    Get human-readable type designation for a schema.
    Arrays are rendered recursively as array[<items>].

    Args:
        schema: Schema dictionary.

    Returns:
        Type string (string, integer, array[Pet], Pet, object, etc.).
    """
    if not isinstance(schema, dict):
        return DEFAULT_SCHEMA_TYPE

    schema_type = schema.get("type")
    if schema_type:
        items = schema.get("items")
        if schema_type == "array" and isinstance(items, dict):
            return f"array[{resolve_schema_type(items)}]"
        if isinstance(schema_type, list):
            # OpenAPI 3.1 allows a list of types
            return " | ".join(str(entry) for entry in schema_type)
        return str(schema_type)

    ref = schema.get("$ref")
    if ref:
        return ref_name(ref)

    return DEFAULT_SCHEMA_TYPE


def resolve_parameter_type(value: Dict[str, Any]) -> str:
    """
    Resolve the type of a parameter or header object.
    A schema takes precedence over an inline (Swagger 2.0 style) type.
    """
    if not isinstance(value, dict):
        return DEFAULT_PARAMETER_TYPE
    if value.get("schema") is not None:
        return resolve_schema_type(value["schema"])
    return str(value.get("type") or DEFAULT_PARAMETER_TYPE)
