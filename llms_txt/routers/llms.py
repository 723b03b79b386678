"""
API routes serving the generated llms.txt document.
"""
import logging
from typing import Dict

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, RedirectResponse, Response

from llms_txt.models.options import LLMsOptions
from llms_txt.services.markdown_generator import compose_document, generate_markdown_from_openapi
from llms_txt.services.openapi_parser import count_endpoints
from llms_txt.services.spec_loader import load_specification
from llms_txt.utils.errors import LLMsError
from llms_txt.utils.validation import validate_specification_root

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error generating LLMs documentation"


def build_router(options: LLMsOptions) -> APIRouter:
    """
    Create the router for the given options.

    Args:
        options: Source, wrapping and content type of the document.

    Returns:
        Router with /llms.txt, /llms-full.txt and /health.
    """
    router = APIRouter()

    @router.get(
        "/llms.txt",
        summary="LLM-readable API documentation",
        description="Markdown rendering of the configured OpenAPI specification.",
        response_class=PlainTextResponse,
        tags=["LLMs"],
    )
    def get_llms_txt(request: Request) -> Response:
        """
        Load the specification, convert it and wrap it with the configured header and footer.

        Any failure is reported as a 500 response with a plain-text message.
        """
        try:
            openapi_spec = load_specification(options, base_url=str(request.base_url))
            validate_specification_root(openapi_spec)
            markdown = generate_markdown_from_openapi(openapi_spec)
            total_endpoints = count_endpoints(openapi_spec)
        except (LLMsError, ValueError) as e:
            logger.warning(f"Could not generate llms.txt: {str(e)}")
            return PlainTextResponse(f"{ERROR_PREFIX}: {str(e)}", status_code=500)
        except Exception as e:
            # Log full traceback for debugging
            logger.error(f"Error generating llms.txt: {str(e)}", exc_info=True)
            return PlainTextResponse(f"{ERROR_PREFIX}: {str(e)}", status_code=500)

        return Response(
            content=compose_document(markdown, options.header, options.footer),
            media_type=options.content_type,
            headers={"X-Total-Endpoints": str(total_endpoints)},
        )

    @router.get("/llms-full.txt", include_in_schema=False)
    def get_llms_full_txt() -> RedirectResponse:
        return RedirectResponse(url="/llms.txt", status_code=301)

    @router.get("/health", tags=["LLMs"])
    def health_check() -> Dict[str, str]:
        """
        Report the current service health and configuration.

        Returns:
            dict: Health status payload with the configured source type.
        """
        return {
            "status": "healthy",
            "service": "llms-txt",
            "source_type": options.source.type,
        }

    return router
