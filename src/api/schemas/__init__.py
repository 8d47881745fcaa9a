"""
API Schemas package.

Pydantic models for request/response validation.
"""

from .generation import (
    GenerationParamsModel,
    GenerationResultModel,
    GenerateRequest,
    GenerateResponse,
    RegenerateRequest,
    RegenerateResponse,
    EnhanceRequest,
    EnhanceResponse,
)
from .history import (
    HistoryItemResponse,
    HistoryListResponse,
    HistoryDeleteResponse,
)
from .settings import (
    ApiKeyStatusResponse,
    ApiKeySaveRequest,
    ApiKeyResponse,
)

__all__ = [
    "GenerationParamsModel",
    "GenerationResultModel",
    "GenerateRequest",
    "GenerateResponse",
    "RegenerateRequest",
    "RegenerateResponse",
    "EnhanceRequest",
    "EnhanceResponse",
    "HistoryItemResponse",
    "HistoryListResponse",
    "HistoryDeleteResponse",
    "ApiKeyStatusResponse",
    "ApiKeySaveRequest",
    "ApiKeyResponse",
]
