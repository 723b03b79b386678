"""
FastAPI application entry point.
"""
from typing import Optional

from fastapi import FastAPI

from llms_txt.config import options_from_env
from llms_txt.models.options import LLMsOptions
from llms_txt.routers.llms import build_router


def create_app(options: Optional[LLMsOptions] = None) -> FastAPI:
    """
    Build the application. Options default to the environment configuration.
    """
    app = FastAPI(
        title="llms.txt Generator",
        description="Serves an OpenAPI specification as LLM-readable Markdown at /llms.txt.",
        version="0.1.0",
    )
    app.include_router(build_router(options or options_from_env()))
    return app


app = create_app()
