"""
LLM API client module.

Turns a built prompt into one completion request and returns the trimmed
text. Provider failures are normalized into exactly one of three user-facing
errors (quota, invalid credential, generic communication failure). No
retries happen at this layer.
"""

import asyncio
import functools
import logging
from typing import Any, Dict, Optional

from .config import DEFAULT_TEMPERATURE
from .errors import (
    CommunicationError,
    GenerationError,
    InvalidCredentialError,
    MissingApiKeyError,
    QuotaExceededError,
)
from .languages import get_system_instruction
from .model_provider import ModelProvider, get_model_info, get_provider

logger = logging.getLogger("scripture_studio")

QUOTA_MARKERS = ("429", "RESOURCE_EXHAUSTED", "rate_limit")
INVALID_KEY_MARKERS = ("API key not valid", "authentication_error", "invalid x-api-key")

STRUCTURED_FAILURE_MESSAGE = "Falha ao gerar dados estruturados com a API do Gemini."


def normalize_error(error: Exception, structured: bool = False) -> GenerationError:
    """
    Map a provider failure onto the user-facing error taxonomy.

    Detection inspects the failure text for known markers; anything
    unrecognised becomes a CommunicationError.

    Args:
        error: Exception raised by the provider SDK
        structured: Whether the failed call was a structured (JSON) request

    Returns:
        GenerationError: QuotaExceededError, InvalidCredentialError or
        CommunicationError
    """
    if isinstance(error, GenerationError):
        return error

    error_text = f"{type(error).__name__}: {error}"

    if any(marker in error_text for marker in QUOTA_MARKERS):
        return QuotaExceededError()
    if any(marker in error_text for marker in INVALID_KEY_MARKERS):
        return InvalidCredentialError()
    if structured:
        return CommunicationError(STRUCTURED_FAILURE_MESSAGE)
    return CommunicationError()


class GenerationClient:
    """
    Completion client bound to one API key and model.

    Synchronous methods call the provider directly; the *_async variants run
    them on the default executor so several requests can be in flight.
    """

    def __init__(
        self,
        api_key: str,
        model_spec: Optional[str] = None,
        temperature: float = DEFAULT_TEMPERATURE,
        provider: Optional[ModelProvider] = None,
    ):
        if not api_key:
            raise MissingApiKeyError()
        self.api_key = api_key
        self.model_spec = model_spec
        self.temperature = temperature
        self.provider = provider or get_provider(model_spec)

        model_info = get_model_info(model_spec)
        logger.info(f"[LLM] Using provider={model_info.provider}, model={model_info.model_name}")

    def _build_config(self, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        config: Dict[str, Any] = {
            "api_key": self.api_key,
            "temperature": self.temperature,
        }
        if overrides:
            config.update(overrides)
        return config

    def complete_text(
        self,
        prompt: str,
        language: str,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Free-text completion.

        Args:
            prompt: Built user prompt
            language: Language code selecting the system instruction
            overrides: Per-call config overrides (e.g. {"temperature": 0.5})

        Returns:
            str: Trimmed completion text

        Raises:
            QuotaExceededError, InvalidCredentialError, CommunicationError
        """
        try:
            result = self.provider.generate(
                get_system_instruction(language),
                prompt,
                self._build_config(overrides),
            )
            return result.text.strip()
        except Exception as e:
            logger.error(f"[LLM] Text generation failed: {e}", exc_info=True)
            raise normalize_error(e) from e

    def complete_structured(self, prompt: str, language: str, schema: Dict[str, Any]) -> str:
        """
        Schema-constrained completion.

        Returns the raw structured-response text; parsing is the caller's job.

        Raises:
            QuotaExceededError, InvalidCredentialError, CommunicationError
        """
        try:
            result = self.provider.generate(
                get_system_instruction(language),
                prompt,
                self._build_config({"response_schema": schema}),
            )
            return result.text.strip()
        except Exception as e:
            logger.error(f"[LLM] Structured generation failed: {e}", exc_info=True)
            raise normalize_error(e, structured=True) from e

    async def complete_text_async(
        self,
        prompt: str,
        language: str,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, functools.partial(self.complete_text, prompt, language, overrides)
        )

    async def complete_structured_async(
        self,
        prompt: str,
        language: str,
        schema: Dict[str, Any],
    ) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, functools.partial(self.complete_structured, prompt, language, schema)
        )
