"""
Configuration constants and environment loading for content generation.
"""

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

from src.infra.data_paths import get_env_float, get_store_path

logger = logging.getLogger("scripture_studio")

# Default model
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

# Sampling
DEFAULT_TEMPERATURE = 0.75
CONTENT_TEMPERATURE = 0.5

# Content length convergence
CHARACTER_TOLERANCE = 500
MAX_CONTENT_ATTEMPTS = 3

# YouTube tag budget: the prompt asks for less than TAG_PROMPT_BUDGET,
# the post-processing safeguard enforces TAG_CHAR_LIMIT.
TAG_CHAR_LIMIT = 500
TAG_PROMPT_BUDGET = 480

# Call-to-action
CTA_MAX_LENGTH = 500
CTA_LOOK_BACK = 50

# Titles
MAX_TITLES = 5

# Thumbnail
THUMBNAIL_TEASER_LENGTH = 300
CAPTION_MIN_WORDS = 3
CAPTION_MAX_WORDS = 5

# JSON schema for list-valued outputs (titles, tags)
STRING_LIST_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "items": {"type": "STRING"},
}


def load_environment() -> Dict[str, Any]:
    """
    Load .env and return the generation settings.

    Unlike the credential stored in the history store, GEMINI_API_KEY is
    optional here: it only serves as a fallback when no key was saved.

    Returns:
        Dict[str, Any]: Settings
            - api_key (str): Fallback API key ("" when unset)
            - model (str): Default model spec
            - temperature (float): Default sampling temperature
            - content_temperature (float): Temperature for the long-form text
            - store_path (str): Key-value store location
            - log_level (str): Logging level
    """
    load_dotenv()

    config = {
        "api_key": os.getenv("GEMINI_API_KEY", ""),
        "model": os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        "temperature": get_env_float("GENERATION_TEMPERATURE", DEFAULT_TEMPERATURE),
        "content_temperature": get_env_float("CONTENT_TEMPERATURE", CONTENT_TEMPERATURE),
        "store_path": str(get_store_path()),
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
    }

    logger.debug(f"[Config] Environment loaded - model: {config['model']}")
    return config
