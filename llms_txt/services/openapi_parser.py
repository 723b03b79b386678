"""
OpenAPI specification traversal helpers.
Walks path items, webhooks and callbacks in document order.
"""
import logging
from typing import Any, Dict, Iterator, Tuple

logger = logging.getLogger(__name__)

# Path-item level key that holds shared parameters, not an operation
PATH_PARAMETERS_KEY = "parameters"


def iter_operations(path_item: Any) -> Iterator[Tuple[str, Dict[str, Any]]]:
    """
    Yield (METHOD, operation) pairs of a path item in insertion order.
    The shared `parameters` list and any non-object value are skipped.
    """
    if not isinstance(path_item, dict):
        return

    for method, operation in path_item.items():
        if method == PATH_PARAMETERS_KEY:
            continue
        if not isinstance(operation, dict):
            # summary, description, servers, $ref
            logger.debug(f"Skipping non-operation field '{method}'")
            continue
        yield str(method).upper(), operation


def count_endpoints(openapi_spec: Dict[str, Any]) -> int:
    """
    Count every operation rendered from the `paths` object.
    """
    paths = openapi_spec.get("paths")
    if not isinstance(paths, dict):
        return 0
    return sum(1 for path_item in paths.values() for _ in iter_operations(path_item))
