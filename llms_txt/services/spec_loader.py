"""
Loading of OpenAPI specifications from local files or URLs.
"""
import json
import logging
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urljoin

import requests

from llms_txt.config import FETCH_TIMEOUT
from llms_txt.models.options import LLMsOptions
from llms_txt.utils.errors import ConfigurationError, SpecificationLoadError
from llms_txt.utils.validation import validate_options

logger = logging.getLogger(__name__)


def parse_from_file(file_path: str) -> Any:
    """
    Read and parse a JSON specification from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Parsed JSON value.

    Raises:
        SpecificationLoadError: If the file cannot be read or is not valid JSON.
    """
    try:
        content = Path(file_path).read_text(encoding="utf-8")
        return json.loads(content)
    except (OSError, ValueError) as e:
        raise SpecificationLoadError(f"Failed to read file: {file_path}. {e}", source=file_path) from e


def parse_from_url(url: str, timeout: float = FETCH_TIMEOUT) -> Any:
    """
    Fetch and parse a JSON specification over HTTP.

    Args:
        url: Absolute URL of the specification.
        timeout: Seconds to wait for the server.

    Returns:
        Parsed JSON body.

    Raises:
        SpecificationLoadError: On network errors, non-2xx responses or a malformed body.
    """
    try:
        response = requests.get(url, headers={"Accept": "application/json"}, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except (requests.RequestException, ValueError) as e:
        raise SpecificationLoadError(f"Failed to fetch URL: {url}. {e}", source=url) from e


def resolve_source_url(url: str, base_url: Optional[str] = None) -> str:
    """
    Make a configured URL absolute. Relative URLs point at the serving application.

    Raises:
        ConfigurationError: If the URL is relative and no base URL is known.
    """
    if url.startswith(("http://", "https://")):
        return url
    if not base_url:
        raise ConfigurationError(f"Cannot resolve relative URL '{url}' without a base URL")
    return urljoin(base_url, url)


def load_specification(options: LLMsOptions, base_url: Optional[str] = None) -> Any:
    """
    Load the specification selected by the options.
    Options are validated before any file or network access.

    Args:
        options: Route options.
        base_url: Base URL of the running application, used for relative source URLs.

    Returns:
        Parsed specification.
    """
    validate_options(options)
    source = options.source

    if source.type == "file":
        logger.info(f"Loading OpenAPI specification from file: {source.file}")
        return parse_from_file(source.file)

    url = resolve_source_url(source.url, base_url)
    logger.info(f"Fetching OpenAPI specification from: {url}")
    return parse_from_url(url)
