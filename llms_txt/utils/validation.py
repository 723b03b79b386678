"""
Validation of llms.txt options and loaded specifications.
"""
import logging
from typing import Any, Optional

from llms_txt.models.options import LLMsOptions
from llms_txt.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


def validate_options(options: LLMsOptions) -> None:
    """
    Validate that the selected source type has its location configured.

    Args:
        options: Route options.

    Raises:
        ConfigurationError: If the file path or URL for the source type is missing.
    """
    source = options.source

    if source.type == "file" and not source.file:
        raise ConfigurationError('File path is required when source type is "file"')

    if source.type == "url" and not source.url:
        raise ConfigurationError('URL is required when source type is "url"')


def validate_specification_root(openapi_spec: Any, source: Optional[str] = None) -> None:
    """
    Check that a loaded specification is a JSON object.
    Everything below the root is rendered best-effort and is not validated.

    Raises:
        ValueError: If the root value is not an object.
    """
    if not isinstance(openapi_spec, dict):
        origin = f" from {source}" if source else ""
        raise ValueError(
            f"Invalid OpenAPI specification{origin}: "
            f"expected a JSON object, got {type(openapi_spec).__name__}."
        )

    if "paths" not in openapi_spec and "webhooks" not in openapi_spec:
        logger.warning("Specification defines neither 'paths' nor 'webhooks'")
