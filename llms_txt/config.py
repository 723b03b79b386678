"""
Configuration management.
Loads environment variables and builds the default llms.txt options.
"""
import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from pydantic import ValidationError

from llms_txt.models.options import DEFAULT_CONTENT_TYPE, DEFAULT_SOURCE_URL, LLMsOptions
from llms_txt.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Load environment variables
# Try to find .env file in multiple locations
env_paths = [
    Path(__file__).parent.parent / ".env",  # Project root (from llms_txt/config.py)
    Path.cwd() / ".env",  # Current working directory
    Path.home() / ".env",  # Home directory (fallback)
]

env_loaded = False
for env_path in env_paths:
    if env_path.exists():
        logger.info(f"Loading .env from: {env_path}")
        load_dotenv(dotenv_path=env_path, override=True)
        env_loaded = True
        break

if not env_loaded:
    # Fallback to default behavior (searches in current directory and parents)
    logger.info("No .env file found in standard locations, using default load_dotenv() behavior")
    load_dotenv()

# Specification source
SOURCE_TYPE = os.getenv("LLMS_SOURCE_TYPE", "url")
SOURCE_FILE = os.getenv("LLMS_SOURCE_FILE")
SOURCE_URL = os.getenv("LLMS_SOURCE_URL", DEFAULT_SOURCE_URL)

# Document wrapping and response type
HEADER = os.getenv("LLMS_HEADER")
FOOTER = os.getenv("LLMS_FOOTER")
CONTENT_TYPE = os.getenv("LLMS_CONTENT_TYPE", DEFAULT_CONTENT_TYPE)

# Seconds to wait for a remote specification
FETCH_TIMEOUT = float(os.getenv("LLMS_FETCH_TIMEOUT", "30"))

logger.info(f"LLMS_SOURCE_TYPE: {SOURCE_TYPE}")
if SOURCE_TYPE == "file" and not SOURCE_FILE:
    logger.warning("LLMS_SOURCE_FILE not configured - /llms.txt will report a configuration error")


def options_from_env() -> LLMsOptions:
    """
    Build route options from the environment.

    Raises:
        ConfigurationError: If an environment value is not an accepted choice.
    """
    try:
        return LLMsOptions(
            source={"type": SOURCE_TYPE, "file": SOURCE_FILE, "url": SOURCE_URL},
            header=HEADER,
            footer=FOOTER,
            contentType=CONTENT_TYPE,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid llms.txt configuration: {e}") from e
