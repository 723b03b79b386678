"""
Error types raised while serving llms.txt documents.
"""


class LLMsError(Exception):
    """Base class for errors raised before a document can be rendered."""


class ConfigurationError(LLMsError, ValueError):
    """Options are incomplete or invalid. Raised before any I/O happens."""


class SpecificationLoadError(LLMsError):
    """
    The OpenAPI specification could not be read, fetched or parsed.

    Attributes:
        source: File path or URL the specification was loaded from.
    """

    def __init__(self, message: str, source: str) -> None:
        super().__init__(message)
        self.source = source
