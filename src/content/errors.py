"""
Content generation exceptions.

Messages are user-facing and shown verbatim by the presentation layer.
"""

from typing import Optional

from .models import GenerationResult


class GenerationError(Exception):
    """Base exception for all generation errors."""

    default_message = "Ocorreu um erro desconhecido durante a geração."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingInputError(GenerationError):
    """Raised before any network call when the credential or idea is absent."""

    default_message = "Por favor, insira a ideia principal para a geração."


class MissingApiKeyError(MissingInputError):
    """Raised when no API credential is configured."""

    default_message = (
        "Por favor, insira e salve sua chave de API do Google AI Studio para continuar."
    )


class QuotaExceededError(GenerationError):
    """Raised when the provider signals rate limiting or resource exhaustion."""

    default_message = (
        "Você excedeu sua cota de API. Por favor, aguarde um pouco antes de "
        "tentar novamente ou verifique seu plano."
    )


class InvalidCredentialError(GenerationError):
    """Raised when the provider rejects the API key."""

    default_message = "Sua chave de API não é válida. Por favor, verifique-a."


class CommunicationError(GenerationError):
    """Catch-all for any other provider failure."""

    default_message = "Falha ao se comunicar com a API do Gemini para gerar texto."


class GenerationFailedError(GenerationError):
    """
    Raised when a "generate all" run fails after it started.

    Carries the outputs produced before the failure so callers can keep
    them visible. The run is not recorded to history.
    """

    def __init__(self, cause: GenerationError, partial: GenerationResult, phase: str):
        self.cause = cause
        self.partial = partial
        self.phase = phase
        super().__init__(cause.message)


# Prefixes used when reporting failures of single-shot operations
ENHANCE_ERROR_PREFIX = "Erro ao aprimorar ideia: "
REGENERATE_ERROR_PREFIX = "Erro ao regenerar: "
