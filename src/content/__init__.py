"""
Content module - video content generation pipeline components.

This module provides the complete generation pipeline:
- Language-aware prompt building for stories and prayers
- Gemini/Claude API integration with error normalization
- Post-processing of titles, tags and call-to-action
- Orchestration of full runs, single-field regeneration and idea enhancement
"""

from .models import (
    CreationType,
    RegenerationField,
    GenerationParams,
    GenerationResult,
    HistoryItem,
)

from .errors import (
    GenerationError,
    MissingInputError,
    MissingApiKeyError,
    QuotaExceededError,
    InvalidCredentialError,
    CommunicationError,
    GenerationFailedError,
)

from .languages import (
    SUPPORTED_LANGUAGES,
    get_language_name,
    get_system_instruction,
)

from .api_client import (
    GenerationClient,
    normalize_error,
)

from .generator import (
    ContentGenerator,
    GenerationStatus,
)

__all__ = [
    # models
    "CreationType",
    "RegenerationField",
    "GenerationParams",
    "GenerationResult",
    "HistoryItem",
    # errors
    "GenerationError",
    "MissingInputError",
    "MissingApiKeyError",
    "QuotaExceededError",
    "InvalidCredentialError",
    "CommunicationError",
    "GenerationFailedError",
    # languages
    "SUPPORTED_LANGUAGES",
    "get_language_name",
    "get_system_instruction",
    # api_client
    "GenerationClient",
    "normalize_error",
    # generator
    "ContentGenerator",
    "GenerationStatus",
]
