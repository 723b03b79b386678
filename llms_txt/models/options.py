"""
Options for serving llms.txt documents.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SOURCE_URL = "/openapi.json"
DEFAULT_CONTENT_TYPE = "text/markdown"


class SourceOptions(BaseModel):
    """Where the OpenAPI specification is read from."""

    model_config = ConfigDict(frozen=True)

    type: Literal["file", "url"] = "url"
    file: Optional[str] = None
    url: Optional[str] = None


class LLMsOptions(BaseModel):
    """
    Configuration of the llms.txt route.

    - **source**: local JSON file or URL (absolute, or relative to the serving app)
    - **header** / **footer**: text wrapped around the generated document
    - **contentType**: `text/markdown` (default) or `text/plain`
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: SourceOptions = Field(
        default_factory=lambda: SourceOptions(type="url", url=DEFAULT_SOURCE_URL)
    )
    header: Optional[str] = None
    footer: Optional[str] = None
    content_type: Literal["text/markdown", "text/plain"] = Field(
        DEFAULT_CONTENT_TYPE, alias="contentType"
    )
