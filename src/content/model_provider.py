"""
Model provider abstraction for content generation.

Supports two LLM backends:
- Gemini (Google AI) - default
- Claude (Anthropic)

Usage:
    provider = get_provider("gemini-2.5-flash")
    result = provider.generate(system_prompt, user_prompt, config)
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import anthropic
from google import genai
from google.genai import types

from .config import DEFAULT_GEMINI_MODEL, DEFAULT_TEMPERATURE

logger = logging.getLogger("scripture_studio")

CLAUDE_MAX_TOKENS = 8192
CLAUDE_JSON_INSTRUCTION = (
    "\n\nRespond ONLY with a valid JSON value matching this schema, "
    "with no surrounding text or code fences: {schema}"
)


@dataclass
class ModelInfo:
    """Model identification information."""
    provider: str  # "gemini", "anthropic"
    model_name: str  # e.g., "gemini-2.5-flash", "claude-sonnet-4-5-20250929"
    full_spec: str


@dataclass
class ProviderResult:
    """Result from a single completion."""
    text: str
    usage: Optional[Dict[str, int]]
    provider: str
    model: str


def parse_model_spec(model_spec: Optional[str]) -> ModelInfo:
    """
    Parse model specification string into provider and model name.

    Formats:
    - None -> default Gemini model from GEMINI_MODEL env
    - "claude-sonnet-4-5-20250929" -> provider="anthropic"
    - "gemini:gemini-2.5-pro" or "gemini-2.5-pro" -> provider="gemini"

    Args:
        model_spec: Model specification string or None for default

    Returns:
        ModelInfo with provider and model name
    """
    if model_spec is None:
        default_model = os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)
        return ModelInfo(provider="gemini", model_name=default_model, full_spec=default_model)

    if model_spec.startswith("claude"):
        return ModelInfo(provider="anthropic", model_name=model_spec, full_spec=model_spec)

    if model_spec.startswith("gemini:"):
        model_name = model_spec.split(":", 1)[1]
        return ModelInfo(provider="gemini", model_name=model_name, full_spec=model_spec)

    return ModelInfo(provider="gemini", model_name=model_spec, full_spec=model_spec)


class ModelProvider(ABC):
    """Abstract base class for model providers."""

    @abstractmethod
    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        config: Dict[str, Any]
    ) -> ProviderResult:
        """
        Generate text using the model.

        Args:
            system_prompt: System instruction text
            user_prompt: User prompt text
            config: api_key, temperature and, for structured output,
                response_schema

        Returns:
            ProviderResult with generated text and metadata
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return provider name for metadata."""
        pass


class GeminiProvider(ModelProvider):
    """Gemini (Google AI) model provider."""

    def __init__(self, model_name: str):
        self.model_name = model_name

    @property
    def provider_name(self) -> str:
        return "gemini"

    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        config: Dict[str, Any]
    ) -> ProviderResult:
        """Generate using the Gemini API, optionally constrained to a JSON schema."""
        logger.info(f"[GeminiProvider] Generating with {self.model_name}")
        client = genai.Client(api_key=config["api_key"])

        config_kwargs: Dict[str, Any] = {
            "system_instruction": system_prompt,
            "temperature": float(config.get("temperature", DEFAULT_TEMPERATURE)),
        }
        schema = config.get("response_schema")
        if schema is not None:
            config_kwargs["response_mime_type"] = "application/json"
            config_kwargs["response_schema"] = schema

        try:
            response = client.models.generate_content(
                model=self.model_name,
                contents=user_prompt,
                config=types.GenerateContentConfig(**config_kwargs),
            )

            text = response.text or ""

            usage = None
            usage_metadata = getattr(response, "usage_metadata", None)
            if usage_metadata:
                try:
                    usage = {
                        "input_tokens": usage_metadata.prompt_token_count or 0,
                        "output_tokens": usage_metadata.candidates_token_count or 0,
                        "total_tokens": usage_metadata.total_token_count or 0,
                    }
                except (AttributeError, TypeError):
                    pass

            logger.info(f"[GeminiProvider] Generated {len(text)} chars")

            return ProviderResult(
                text=text,
                usage=usage,
                provider=self.provider_name,
                model=self.model_name
            )

        except Exception as e:
            logger.error(f"[GeminiProvider] Generation failed: {e}")
            raise


class ClaudeProvider(ModelProvider):
    """Claude (Anthropic) model provider."""

    def __init__(self, model_name: str):
        self.model_name = model_name

    @property
    def provider_name(self) -> str:
        return "anthropic"

    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        config: Dict[str, Any]
    ) -> ProviderResult:
        """Generate using the Claude API. Structured output is requested in the prompt."""
        logger.info(f"[ClaudeProvider] Generating with {self.model_name}")
        client = anthropic.Anthropic(api_key=config["api_key"])

        schema = config.get("response_schema")
        if schema is not None:
            user_prompt += CLAUDE_JSON_INSTRUCTION.format(schema=json.dumps(schema))

        try:
            message = client.messages.create(
                model=self.model_name,
                max_tokens=int(config.get("max_tokens", CLAUDE_MAX_TOKENS)),
                temperature=float(config.get("temperature", DEFAULT_TEMPERATURE)),
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}]
            )

            text = message.content[0].text

            usage = None
            if hasattr(message, 'usage') and message.usage:
                try:
                    usage = {
                        "input_tokens": message.usage.input_tokens,
                        "output_tokens": message.usage.output_tokens,
                        "total_tokens": message.usage.input_tokens + message.usage.output_tokens
                    }
                except (AttributeError, TypeError):
                    pass

            logger.info(f"[ClaudeProvider] Generated {len(text)} chars")

            return ProviderResult(
                text=text,
                usage=usage,
                provider=self.provider_name,
                model=self.model_name
            )

        except Exception as e:
            logger.error(f"[ClaudeProvider] Generation failed: {e}")
            raise


def get_provider(model_spec: Optional[str] = None) -> ModelProvider:
    """
    Get appropriate model provider for the given model specification.

    Args:
        model_spec: Model specification (e.g., "gemini-2.5-flash" or
                   "claude-sonnet-4-5-20250929"). None uses the default
                   Gemini model from the environment.

    Returns:
        ModelProvider instance
    """
    info = parse_model_spec(model_spec)

    if info.provider == "anthropic":
        return ClaudeProvider(info.model_name)
    return GeminiProvider(info.model_name)


def get_model_info(model_spec: Optional[str] = None) -> ModelInfo:
    """Get model information without creating a provider."""
    return parse_model_spec(model_spec)
